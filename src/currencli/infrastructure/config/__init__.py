"""Configuration: settings and file path resolution."""

from .paths import credential_path, favorites_path
from .settings import AppSettings, get_settings

__all__ = ["AppSettings", "get_settings", "credential_path", "favorites_path"]
