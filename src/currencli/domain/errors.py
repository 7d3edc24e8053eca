"""Error hierarchy for currencli.

Components raise these exceptions instead of terminating the process; the
top-level ``cli()`` in ``currencli.presentation.cli.main`` turns them into a
diagnostic on stderr and a non-zero exit code.

Categories:
- DomainError: invalid user input or an impossible conversion
- ConfigurationError: unsupported host platform or unusable settings
- InvalidCredentialError: the API key was rejected by the provider
- TransportError: network/HTTP/payload failure while fetching rates
- PersistenceError: credential or favorites file could not be read/written
"""
from __future__ import annotations

__all__ = [
    "CurrencliError",
    "DomainError",
    "ValidationError",
    "ConversionUnavailableError",
    "ConfigurationError",
    "InvalidCredentialError",
    "TransportError",
    "PersistenceError",
]


class CurrencliError(Exception):
    """Base class for all errors surfaced to the CLI user."""


class DomainError(CurrencliError):
    """Raised when a domain rule is violated."""


class ValidationError(DomainError):
    """Raised when user input is invalid or cannot be parsed."""


class ConversionUnavailableError(DomainError):
    """Raised when the target currency is absent from a fetched rate table."""

    def __init__(self, from_code: str | None, to_code: str) -> None:
        if from_code:
            message = f"Unable to convert from {from_code} to {to_code}"
        else:
            message = f"Unable to convert to {to_code}"
        super().__init__(message)
        self.from_code = from_code
        self.to_code = to_code


class ConfigurationError(CurrencliError):
    """Raised for unsupported platforms or unusable configuration."""


class InvalidCredentialError(CurrencliError):
    """Raised when the stored API key is not accepted by the provider."""


class TransportError(CurrencliError):
    """Raised when the rate provider cannot be reached or answers badly."""


class PersistenceError(CurrencliError):
    """Raised when a local file cannot be read or written."""
