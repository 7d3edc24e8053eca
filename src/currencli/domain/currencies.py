"""Currency value objects.

Public API:
- RateTable: mapping of currency code to rate relative to one base currency.
- normalize_code: strip and upper-case a user-entered currency code.
- parse_amount: turn user-entered text into a finite float.
- FavoritePair: remembered (from, to) pair with its JSON wire shape.

No infrastructure dependencies.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from .errors import ValidationError

__all__ = [
    "RateTable",
    "normalize_code",
    "parse_amount",
    "FavoritePair",
]

RateTable = dict[str, float]


def normalize_code(code: str) -> str:
    """Return the upper-cased, stripped form of ``code``.

    Raises:
        ValidationError: if nothing is left after stripping.
    """
    normalized = (code or "").strip().upper()
    if not normalized:
        raise ValidationError("Empty currency code")
    return normalized


def parse_amount(value: str | float | int) -> float:
    """Parse an amount entered by the user.

    Accepts anything ``float()`` accepts (so ``"1e3"`` and ``" 12.5 "`` work)
    but rejects NaN and infinities.

    Raises:
        ValidationError: on non-numeric or non-finite input.
    """
    try:
        amount = float(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid amount: {value!r}") from exc
    if not math.isfinite(amount):
        raise ValidationError(f"Invalid amount: {value!r}")
    return amount


@dataclass(frozen=True, slots=True)
class FavoritePair:
    """A saved (from, to) currency pair.

    Build new pairs with :meth:`create`, which normalizes the codes. Pairs read
    back with :meth:`from_dict` keep the stored object as-is so that rewriting
    the file never alters existing entries. Duplicates are allowed at the list
    level; the pair itself carries no identity.
    """

    from_currency: str
    to_currency: str
    stored: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def create(cls, from_code: str, to_code: str) -> FavoritePair:
        return cls(normalize_code(from_code), normalize_code(to_code))

    def to_dict(self) -> dict[str, Any]:
        if self.stored is not None:
            return dict(self.stored)
        return {"fromCurrency": self.from_currency, "toCurrency": self.to_currency}

    @classmethod
    def from_dict(cls, raw: Any) -> FavoritePair:
        if not isinstance(raw, dict):
            raise ValidationError(f"Favorite pair must be an object, got {type(raw).__name__}")
        try:
            return cls(str(raw["fromCurrency"]), str(raw["toCurrency"]), stored=dict(raw))
        except KeyError as exc:
            raise ValidationError(f"Favorite pair missing field {exc.args[0]!r}") from exc

    def __str__(self) -> str:
        return f"{self.from_currency} -> {self.to_currency}"
