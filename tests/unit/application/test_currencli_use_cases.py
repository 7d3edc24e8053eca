from __future__ import annotations

import pytest

from currencli.application.use_cases import (
    API_KEY_PROMPT,
    AcquireCredential,
    ConvertAmount,
    ListFavorites,
    ListRates,
    SaveFavorite,
    ValidateCredential,
)
from currencli.domain.currencies import FavoritePair
from currencli.domain.errors import (
    ConversionUnavailableError,
    InvalidCredentialError,
    TransportError,
    ValidationError,
)
from currencli.presentation.cli.prompts import ScriptedInput


class MemoryCredentialStore:
    def __init__(self, value: str | None = None) -> None:
        self.value = value
        self.saves: list[str] = []

    def load(self) -> str | None:
        return self.value

    def save(self, credential: str) -> None:
        self.saves.append(credential)
        self.value = credential


class MemoryFavoritesStore:
    def __init__(self) -> None:
        self.pairs: list[FavoritePair] = []

    def load(self) -> list[FavoritePair]:
        return list(self.pairs)

    def save(self, pairs: list[FavoritePair]) -> None:
        self.pairs = list(pairs)


class StubRateProvider:
    def __init__(self, rates: dict[str, float], valid: bool = True) -> None:
        self.rates = rates
        self.valid = valid
        self.fetched: list[tuple[str, str]] = []

    def fetch_rates(self, credential: str, base_code: str) -> dict[str, float]:
        self.fetched.append((credential, base_code))
        return self.rates

    def validate_credential(self, credential: str) -> bool:
        return self.valid


def test_acquire_returns_stored_key_without_prompting():
    store = MemoryCredentialStore("stored")
    inputs = ScriptedInput([])
    acquired = AcquireCredential(store, inputs)()
    assert acquired.credential == "stored"
    assert acquired.created is False
    assert inputs.asked == []
    assert store.saves == []


def test_acquire_prompts_once_and_saves_when_absent():
    store = MemoryCredentialStore(None)
    inputs = ScriptedInput(["  abc123 "])
    acquired = AcquireCredential(store, inputs)()
    assert acquired.credential == "abc123"
    assert acquired.created is True
    assert inputs.asked == [API_KEY_PROMPT]
    assert store.saves == ["abc123"]


def test_acquire_rejects_blank_answer():
    with pytest.raises(ValidationError):
        AcquireCredential(MemoryCredentialStore(None), ScriptedInput(["   "]))()


def test_validate_credential_raises_on_rejection():
    ValidateCredential(StubRateProvider({}, valid=True))("k")
    with pytest.raises(InvalidCredentialError) as ei:
        ValidateCredential(StubRateProvider({}, valid=False))("k")
    assert str(ei.value) == "Invalid API key. Please try again."


def test_convert_amount_upper_cases_codes_before_fetch():
    provider = StubRateProvider({"EUR": 0.5})
    result = ConvertAmount(provider)("key", "10", "usd", "eur")
    assert provider.fetched == [("key", "USD")]
    assert result.result == 5.0
    assert result.rate == 0.5
    assert (result.from_currency, result.to_currency) == ("USD", "EUR")


def test_convert_amount_rejects_invalid_amount_before_fetch():
    provider = StubRateProvider({"EUR": 0.5})
    with pytest.raises(ValidationError):
        ConvertAmount(provider)("key", "ten", "usd", "eur")
    assert provider.fetched == []


def test_convert_amount_missing_target_names_both_currencies():
    provider = StubRateProvider({"EUR": 0.5})
    with pytest.raises(ConversionUnavailableError) as ei:
        ConvertAmount(provider)("key", "1", "usd", "xyz")
    assert "USD" in str(ei.value) and "XYZ" in str(ei.value)


def test_convert_amount_propagates_transport_error():
    class Failing(StubRateProvider):
        def fetch_rates(self, credential: str, base_code: str) -> dict[str, float]:
            raise TransportError("Error fetching exchange rates: down")

    with pytest.raises(TransportError):
        ConvertAmount(Failing({}))("key", "1", "usd", "eur")


def test_list_rates_normalizes_base():
    provider = StubRateProvider({"EUR": 0.91, "GBP": 0.79})
    base, rates = ListRates(provider)("key", "usd")
    assert base == "USD"
    assert list(rates.items()) == [("EUR", 0.91), ("GBP", 0.79)]
    assert provider.fetched == [("key", "USD")]


def test_save_favorite_appends_in_order_and_keeps_duplicates():
    store = MemoryFavoritesStore()
    SaveFavorite(store)("usd", "eur")
    SaveFavorite(store)("gbp", "jpy")
    SaveFavorite(store)("usd", "eur")
    assert [str(p) for p in ListFavorites(store)()] == ["USD -> EUR", "GBP -> JPY", "USD -> EUR"]


def test_list_favorites_empty():
    assert ListFavorites(MemoryFavoritesStore())() == []


def test_save_favorite_normalizes_only_the_new_pair():
    store = MemoryFavoritesStore()
    stored = {"fromCurrency": "usd", "toCurrency": "eur", "note": "x"}
    store.pairs = [FavoritePair.from_dict(stored)]

    SaveFavorite(store)("gbp", "jpy")

    assert [p.to_dict() for p in store.pairs] == [stored, {"fromCurrency": "GBP", "toCurrency": "JPY"}]
