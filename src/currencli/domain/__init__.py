"""Domain layer: currency value objects, conversion and errors."""

from .conversion import convert, lookup_rate
from .currencies import FavoritePair, RateTable, normalize_code, parse_amount
from .errors import (
    ConfigurationError,
    ConversionUnavailableError,
    CurrencliError,
    DomainError,
    InvalidCredentialError,
    PersistenceError,
    TransportError,
    ValidationError,
)

__all__ = [
    "convert",
    "lookup_rate",
    "FavoritePair",
    "RateTable",
    "normalize_code",
    "parse_amount",
    "CurrencliError",
    "DomainError",
    "ValidationError",
    "ConversionUnavailableError",
    "ConfigurationError",
    "InvalidCredentialError",
    "TransportError",
    "PersistenceError",
]
