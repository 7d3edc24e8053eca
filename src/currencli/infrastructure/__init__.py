"""Infrastructure adapters: settings, logging, files and the HTTP provider."""
