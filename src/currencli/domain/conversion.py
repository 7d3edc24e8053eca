from __future__ import annotations

from collections.abc import Mapping

from .currencies import normalize_code
from .errors import ConversionUnavailableError

__all__ = ["lookup_rate", "convert"]


def lookup_rate(rates: Mapping[str, float], to_code: str, *, from_code: str | None = None) -> float:
    """Return the rate for ``to_code`` or raise ConversionUnavailableError.

    ``to_code`` is normalized before the lookup. A zero rate is treated as missing.
    """
    code = normalize_code(to_code)
    rate = rates.get(code)
    if not rate:
        raise ConversionUnavailableError(normalize_code(from_code) if from_code else None, code)
    return rate


def convert(amount: float, rates: Mapping[str, float], to_code: str, *, from_code: str | None = None) -> float:
    """Convert ``amount`` using the rate for ``to_code``.

    The raw floating-point product is returned; no rounding is applied.
    """
    return amount * lookup_rate(rates, to_code, from_code=from_code)
