"""Top-level package for currencli.

Currency conversion CLI backed by ExchangeRate-API: convert amounts, list
rates for a base currency and keep favorite currency pairs on disk.
"""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
