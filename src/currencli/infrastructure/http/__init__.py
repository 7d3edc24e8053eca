from .exchange_rate_api import VALIDATION_BASE_CURRENCY, ExchangeRateApiClient

__all__ = ["ExchangeRateApiClient", "VALIDATION_BASE_CURRENCY"]
