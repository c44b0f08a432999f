"""Cache-aside lookup of market data by symbol.

Flow:
1. Check Redis cache for the symbol -> return snapshot immediately
2. On miss, read the market_data row from PostgreSQL
3. Cache the row in Redis for TTL_MARKET_DATA seconds, then return it

Notes:
- Cache hits never refresh the TTL; a cached snapshot may lag the table
  by up to TTL_MARKET_DATA seconds.
- Concurrent misses for one symbol may both read and write (last write wins).
- Backend failures are not retried and never fall back to stale data.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from market_data_service.schemas import MarketRecord
from market_data_service.stores import CacheStore, RecordStore
from market_data_service.stores.redis import TTL_MARKET_DATA

logger = logging.getLogger("uvicorn.error")

# Failures from either backend (or a payload failing validation) abort the request.
BACKEND_ERRORS = (RedisError, SQLAlchemyError, OSError, ValidationError)


class MarketDataError(RuntimeError):
    pass


class SymbolNotFoundError(MarketDataError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"No market data for {symbol}")
        self.symbol = symbol


class MarketDataUnavailableError(MarketDataError):
    def __init__(self, symbol: str, message: str) -> None:
        super().__init__(message)
        self.symbol = symbol


class MarketDataService:
    """Serves market records through the cache, falling back to the record store."""

    def __init__(
        self,
        cache: CacheStore,
        records: RecordStore,
        *,
        ttl_seconds: int = TTL_MARKET_DATA,
    ) -> None:
        self.cache = cache
        self.records = records
        self.ttl_seconds = ttl_seconds

    async def get_market_data(self, symbol: str) -> MarketRecord:
        """Get the market record for `symbol`.

        Args:
            symbol: Ticker symbol, used verbatim as cache key and query value.

        Returns:
            The cached snapshot, or the store row (which is then cached).

        Raises:
            SymbolNotFoundError: No row exists for the symbol.
            MarketDataUnavailableError: Cache or record store failed.
        """
        try:
            cached = await self.cache.get(symbol)
            if cached:
                logger.debug(f"Market data cache hit: {symbol}")
                return MarketRecord.model_validate_json(cached)

            logger.debug(f"Market data cache miss: {symbol}")
            record = await self.records.find_by_symbol(symbol)
            if record is None:
                logger.info(f"Market data not found: {symbol}")
                raise SymbolNotFoundError(symbol)

            await self.cache.set_with_ttl(symbol, record.model_dump_json(), self.ttl_seconds)
            return record
        except BACKEND_ERRORS as exc:
            logger.exception(f"Market data lookup failed for {symbol}")
            raise MarketDataUnavailableError(
                symbol, f"Market data backend unavailable: {type(exc).__name__}"
            ) from exc
