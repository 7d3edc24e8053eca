"""Bootstrap: build the application context from settings.

``init_app`` resolves both file paths, constructs the stores and the rate
provider, and returns an ``AppContext``. The credential is filled in later by
the CLI startup sequence; nothing here touches the network or the disk.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx

from currencli.application.ports import CredentialStore, FavoritesStore, RateProvider
from currencli.infrastructure.config.paths import credential_path, favorites_path
from currencli.infrastructure.config.settings import AppSettings, get_settings
from currencli.infrastructure.http.exchange_rate_api import ExchangeRateApiClient
from currencli.infrastructure.persistence.credentials import FileCredentialStore
from currencli.infrastructure.persistence.favorites import JsonFavoritesStore

__all__ = ["AppContext", "init_app"]


@dataclass(slots=True)
class AppContext:
    """Everything a command needs, passed explicitly instead of module globals.

    Attributes:
        settings: Settings used to build the context.
        credential_path: Resolved API key file.
        favorites_path: Resolved favorites file.
        credentials: Store owning ``credential_path``.
        favorites: Store owning ``favorites_path``.
        rates: Rate provider client.
        credential: The API key once acquired and validated, else None.
    """

    settings: AppSettings
    credential_path: Path
    favorites_path: Path
    credentials: CredentialStore
    favorites: FavoritesStore
    rates: RateProvider
    credential: str | None = None

    def require_credential(self) -> str:
        if self.credential is None:
            raise RuntimeError("credential not acquired yet")
        return self.credential


def init_app(settings: AppSettings | None = None, *, transport: httpx.BaseTransport | None = None) -> AppContext:
    """Initialize the application context.

    Raises:
        ConfigurationError: if the host platform is unsupported.
    """
    settings = settings or get_settings()
    cred_path = credential_path(settings)
    fav_path = favorites_path(settings)
    return AppContext(
        settings=settings,
        credential_path=cred_path,
        favorites_path=fav_path,
        credentials=FileCredentialStore(cred_path),
        favorites=JsonFavoritesStore(fav_path),
        rates=ExchangeRateApiClient(settings.api_base_url, timeout=settings.http_timeout, transport=transport),
    )
