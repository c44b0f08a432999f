"""Shared fixtures: in-memory cache and record stores, app client."""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from market_data_service.main import create_app
from market_data_service.routes.market_data import get_market_data_service
from market_data_service.schemas import MarketRecord
from market_data_service.services import MarketDataService


class FakeClock:
    """Manually advanced clock for TTL checks."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCacheStore:
    """Cache store keeping (value, expires_at) in a dict and recording writes."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.entries: dict[str, tuple[str, float]] = {}
        self.writes: list[tuple[str, str, int]] = []
        self.fail_with: Exception | None = None
        self.ping_error: Exception | None = None
        self.close_error: Exception | None = None
        self.closed = False

    async def get(self, key: str) -> str | None:
        if self.fail_with:
            raise self.fail_with
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self.entries[key]
            return None
        return value

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None:
        if self.fail_with:
            raise self.fail_with
        self.writes.append((key, value, ttl_seconds))
        self.entries[key] = (value, self.clock() + ttl_seconds)

    def ttl(self, key: str) -> float | None:
        entry = self.entries.get(key)
        return None if entry is None else entry[1] - self.clock()

    async def ping(self) -> None:
        if self.ping_error:
            raise self.ping_error

    async def close(self) -> None:
        self.closed = True
        if self.close_error:
            raise self.close_error


class FakeRecordStore:
    """Record store over a dict of rows, counting lookups."""

    def __init__(self, rows: dict[str, dict] | None = None) -> None:
        self.rows = dict(rows or {})
        self.lookups: list[str] = []
        self.fail_with: Exception | None = None
        self.ping_error: Exception | None = None
        self.closed = False

    async def find_by_symbol(self, symbol: str) -> MarketRecord | None:
        self.lookups.append(symbol)
        # Suspend like a real query so concurrent lookups interleave.
        await asyncio.sleep(0)
        if self.fail_with:
            raise self.fail_with
        row = self.rows.get(symbol)
        return None if row is None else MarketRecord.model_validate(row)

    async def ping(self) -> None:
        if self.ping_error:
            raise self.ping_error

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> FakeCacheStore:
    return FakeCacheStore(clock)


@pytest.fixture
def records() -> FakeRecordStore:
    return FakeRecordStore({"AAPL": {"symbol": "AAPL", "price": 150, "change": 1.2}})


@pytest.fixture
def service(cache: FakeCacheStore, records: FakeRecordStore) -> MarketDataService:
    return MarketDataService(cache=cache, records=records)


@pytest.fixture
async def client(service: MarketDataService):
    """Create test client with the fake-backed service injected."""
    app = create_app()
    app.dependency_overrides[get_market_data_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
