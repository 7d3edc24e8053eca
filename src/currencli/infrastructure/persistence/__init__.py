"""File-backed stores for the API key and favorite pairs."""

from .credentials import FileCredentialStore
from .favorites import JsonFavoritesStore

__all__ = ["FileCredentialStore", "JsonFavoritesStore"]
