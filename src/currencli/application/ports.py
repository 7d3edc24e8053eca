"""Protocols for the collaborators used by the use cases.

Implementations:
- CredentialStore: infrastructure.persistence.credentials.FileCredentialStore
- FavoritesStore: infrastructure.persistence.favorites.JsonFavoritesStore
- RateProvider: infrastructure.http.exchange_rate_api.ExchangeRateApiClient
- InputProvider: presentation.cli.prompts.PromptInput / ScriptedInput
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from currencli.domain.currencies import FavoritePair, RateTable

__all__ = [
    "CredentialStore",
    "FavoritesStore",
    "RateProvider",
    "InputProvider",
]


@runtime_checkable
class CredentialStore(Protocol):
    """Durable storage of the single API key."""

    def load(self) -> str | None: ...
    def save(self, credential: str) -> None: ...


@runtime_checkable
class FavoritesStore(Protocol):
    """Durable storage of the ordered favorites list."""

    def load(self) -> list[FavoritePair]: ...
    def save(self, pairs: list[FavoritePair]) -> None: ...


@runtime_checkable
class RateProvider(Protocol):
    """Remote exchange-rate service."""

    def fetch_rates(self, credential: str, base_code: str) -> RateTable: ...
    def validate_credential(self, credential: str) -> bool: ...


@runtime_checkable
class InputProvider(Protocol):
    """Source of free-text answers (interactive prompt or scripted fixture)."""

    def ask(self, message: str) -> str: ...
