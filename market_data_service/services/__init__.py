"""Business logic services.

- market_data: cache-aside lookup of market records by symbol
"""

from market_data_service.services.market_data import (
    MarketDataError,
    MarketDataService,
    MarketDataUnavailableError,
    SymbolNotFoundError,
)

__all__ = [
    "MarketDataError",
    "MarketDataService",
    "MarketDataUnavailableError",
    "SymbolNotFoundError",
]
