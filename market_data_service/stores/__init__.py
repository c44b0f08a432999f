"""Data stores for persistence and caching.

Stores handle:
- PostgreSQL: engine, session factory, market_data row lookups
- Redis: cached market-data snapshots with TTL

No business logic in stores - the cache-aside flow belongs in services.
"""

from market_data_service.stores.base import CacheStore, RecordStore

__all__ = ["CacheStore", "RecordStore"]
