from .main import app, cli

__all__ = ["app", "cli"]
