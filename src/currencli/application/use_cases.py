"""Use cases behind the CLI commands.

Each use case is a small dataclass holding its collaborators and exposing
``__call__``. They never print or exit; results are returned as values and
failures raised as ``CurrencliError`` subclasses for the CLI layer to render.
"""
from __future__ import annotations

from dataclasses import dataclass

from currencli.domain.conversion import convert
from currencli.domain.currencies import FavoritePair, RateTable, normalize_code, parse_amount
from currencli.domain.errors import InvalidCredentialError, ValidationError
from currencli.infrastructure.logging.config import get_logger

from .ports import CredentialStore, FavoritesStore, InputProvider, RateProvider

__all__ = [
    "API_KEY_PROMPT",
    "AcquiredCredential",
    "AcquireCredential",
    "ValidateCredential",
    "ConversionResult",
    "ConvertAmount",
    "ListRates",
    "SaveFavorite",
    "ListFavorites",
]

API_KEY_PROMPT = "Enter your ExchangeRate-API key"

log = get_logger("currencli.use_cases")


@dataclass(frozen=True, slots=True)
class AcquiredCredential:
    credential: str
    created: bool


@dataclass
class AcquireCredential:
    """Load the stored API key or prompt once for it and persist it."""

    store: CredentialStore
    inputs: InputProvider

    def __call__(self) -> AcquiredCredential:
        existing = self.store.load()
        if existing:
            return AcquiredCredential(existing, created=False)
        answer = self.inputs.ask(API_KEY_PROMPT).strip()
        if not answer:
            raise ValidationError("Empty API key")
        self.store.save(answer)
        log.info("credential_saved")
        return AcquiredCredential(answer, created=True)


@dataclass
class ValidateCredential:
    """Probe the provider with the key; raise InvalidCredentialError on rejection."""

    provider: RateProvider

    def __call__(self, credential: str) -> None:
        if not self.provider.validate_credential(credential):
            raise InvalidCredentialError("Invalid API key. Please try again.")


@dataclass(frozen=True, slots=True)
class ConversionResult:
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    result: float


@dataclass
class ConvertAmount:
    provider: RateProvider

    def __call__(self, credential: str, amount: str | float, from_code: str, to_code: str) -> ConversionResult:
        value = parse_amount(amount)
        src = normalize_code(from_code)
        dst = normalize_code(to_code)
        rates = self.provider.fetch_rates(credential, src)
        result = convert(value, rates, dst, from_code=src)
        log.debug("converted", amount=value, from_currency=src, to_currency=dst, result=result)
        return ConversionResult(value, src, dst, rates[dst], result)


@dataclass
class ListRates:
    provider: RateProvider

    def __call__(self, credential: str, base_code: str) -> tuple[str, RateTable]:
        base = normalize_code(base_code)
        return base, self.provider.fetch_rates(credential, base)


@dataclass
class SaveFavorite:
    """Append one pair to the favorites list (load full list, push, save full list)."""

    store: FavoritesStore

    def __call__(self, from_code: str, to_code: str) -> FavoritePair:
        pair = FavoritePair.create(from_code, to_code)
        favorites = self.store.load()
        favorites.append(pair)
        self.store.save(favorites)
        return pair


@dataclass
class ListFavorites:
    store: FavoritesStore

    def __call__(self) -> list[FavoritePair]:
        return self.store.load()
