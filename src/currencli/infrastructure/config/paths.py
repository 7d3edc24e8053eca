"""Resolution of the two files currencli owns.

- Credential file: ``<home>/.exchange-rate-api.txt`` on Windows, macOS and
  Linux; other platforms are rejected.
- Favorites file: ``favorites.json`` relative to the current working
  directory (not the home directory).

Both can be overridden through settings.
"""
from __future__ import annotations

import sys
from pathlib import Path

from currencli.domain.errors import ConfigurationError

from .settings import AppSettings

__all__ = [
    "API_NAME",
    "SUPPORTED_PLATFORMS",
    "credential_path",
    "favorites_path",
]

API_NAME = "exchange-rate-api"
SUPPORTED_PLATFORMS = frozenset({"win32", "darwin", "linux"})


def credential_path(settings: AppSettings, *, platform: str | None = None, home: Path | None = None) -> Path:
    if settings.credential_file:
        return Path(settings.credential_file).expanduser()
    current = platform or sys.platform
    if current not in SUPPORTED_PLATFORMS:
        raise ConfigurationError("Unsupported operating system")
    return (home or Path.home()) / f".{API_NAME}.txt"


def favorites_path(settings: AppSettings, *, cwd: Path | None = None) -> Path:
    path = Path(settings.favorites_file).expanduser()
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path
