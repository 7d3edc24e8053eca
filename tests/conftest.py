from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

from currencli.bootstrap import AppContext, init_app
from currencli.infrastructure.config.settings import AppSettings, get_settings
from currencli.infrastructure.logging.config import configure_logging
from currencli.presentation.cli.main import CliState
from currencli.presentation.cli.prompts import ScriptedInput

VALID_KEY = "abc123"

DEFAULT_TABLES: dict[str, dict[str, float]] = {
    "USD": {"USD": 1, "EUR": 0.5, "GBP": 0.25},
    "EUR": {"EUR": 1, "USD": 2, "GBP": 0.5},
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run every test in its own cwd with no currencli/logging env leaking in."""
    for key in (
        "CURRENCLI_API_BASE_URL",
        "CURRENCLI_HTTP_TIMEOUT",
        "CURRENCLI_CREDENTIAL_FILE",
        "CURRENCLI_FAVORITES_FILE",
        "LOG_LEVEL",
        "JSON_LOGS",
        "LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOGGING_ENABLED", "false")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    configure_logging(settings=AppSettings(logging_enabled=False))
    yield
    get_settings.cache_clear()


class FakeExchangeRateApi:
    """httpx handler imitating ``/v6/{key}/latest/{CODE}``; records (key, code) calls."""

    def __init__(self, tables: dict[str, dict[str, Any]], valid_keys: Iterable[str] = (VALID_KEY,)) -> None:
        self.tables = tables
        self.valid_keys = set(valid_keys)
        self.calls: list[tuple[str, str]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        _, _, key, _, code = request.url.path.split("/")
        self.calls.append((key, code))
        if key not in self.valid_keys:
            return httpx.Response(403, json={"result": "error", "error-type": "invalid-key"})
        if code not in self.tables:
            return httpx.Response(404, json={"result": "error", "error-type": "unsupported-code"})
        return httpx.Response(
            200,
            json={"result": "success", "base_code": code, "conversion_rates": self.tables[code]},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_api() -> FakeExchangeRateApi:
    return FakeExchangeRateApi(dict(DEFAULT_TABLES))


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        credential_file=str(tmp_path / ".exchange-rate-api.txt"),
        favorites_file="favorites.json",
        logging_enabled=False,
    )


@pytest.fixture
def app_context(settings: AppSettings, fake_api: FakeExchangeRateApi) -> AppContext:
    return init_app(settings, transport=fake_api.transport)


@pytest.fixture
def make_state(app_context: AppContext) -> Callable[..., CliState]:
    """Build a CliState whose prompts are answered by the given strings."""

    def _make(*answers: str) -> CliState:
        return CliState(app=app_context, inputs=ScriptedInput(answers))

    return _make


@pytest.fixture
def stored_key(app_context: AppContext) -> str:
    app_context.credential_path.write_text(VALID_KEY, encoding="utf-8")
    return VALID_KEY
