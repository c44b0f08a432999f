"""Capability interfaces the lookup service depends on.

Concrete adapters live in `stores.redis` and `stores.postgres`; tests
substitute in-memory fakes that satisfy the same protocols.
"""

from typing import Protocol

from market_data_service.schemas import MarketRecord


class CacheStore(Protocol):
    """Key-value store with per-key expiration."""

    async def get(self, key: str) -> str | None: ...

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None: ...


class RecordStore(Protocol):
    """Authoritative store holding one market-data row per symbol."""

    async def find_by_symbol(self, symbol: str) -> MarketRecord | None: ...
