"""ExchangeRate-API v6 client.

Only one endpoint is used::

    GET {base_url}/{api_key}/latest/{CODE}

and only the ``conversion_rates`` field of the answer is read. Failures are
reported as TransportError; there is no retry and no caching.
"""
from __future__ import annotations

from typing import Any

import httpx

from currencli.domain.currencies import RateTable
from currencli.domain.errors import TransportError
from currencli.infrastructure.config.settings import DEFAULT_API_BASE_URL
from currencli.infrastructure.logging.config import get_logger

__all__ = ["VALIDATION_BASE_CURRENCY", "ExchangeRateApiClient"]

VALIDATION_BASE_CURRENCY = "USD"

log = get_logger("currencli.http")


def _error_type(response: httpx.Response) -> str | None:
    # Provider error envelope: {"result": "error", "error-type": "invalid-key"}
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("result") == "error":
        return str(body.get("error-type") or "unknown-error")
    return None


class ExchangeRateApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _url(self, credential: str, base_code: str) -> str:
        return f"{self.base_url}/{credential}/latest/{base_code}"

    def _get(self, credential: str, base_code: str) -> dict[str, Any]:
        redacted = self._url("***", base_code)
        log.debug("http_request", url=redacted)
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(self._url(credential, base_code))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Error fetching exchange rates: {exc}") from exc

        if response.is_error:
            reason = _error_type(response)
            detail = f"HTTP {response.status_code}" + (f" ({reason})" if reason else "")
            raise TransportError(f"Error fetching exchange rates: {detail}")
        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError("Error fetching exchange rates: response is not JSON") from exc
        if not isinstance(body, dict):
            raise TransportError("Error fetching exchange rates: unexpected response shape")
        reason = _error_type(response)
        if reason:
            raise TransportError(f"Error fetching exchange rates: {reason}")
        log.debug("http_response", url=redacted, status=response.status_code)
        return body

    def fetch_rates(self, credential: str, base_code: str) -> RateTable:
        """Return the provider's ``conversion_rates`` table for ``base_code`` as-is."""
        body = self._get(credential, base_code)
        rates = body.get("conversion_rates")
        if not isinstance(rates, dict):
            raise TransportError("Error fetching exchange rates: conversion_rates missing from response")
        return rates

    def validate_credential(self, credential: str) -> bool:
        """Probe the API with ``credential``; never raises TransportError."""
        try:
            self.fetch_rates(credential, VALIDATION_BASE_CURRENCY)
        except TransportError as exc:
            log.warning("credential_rejected", reason=str(exc))
            return False
        return True
