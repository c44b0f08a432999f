"""Schemas for the market-data endpoint (/market-data/{symbol})."""

from pydantic import BaseModel, ConfigDict


class MarketRecord(BaseModel):
    """Market snapshot for a single symbol.

    Validated both when read from the record store (ORM row) and when
    read back from the cache (JSON). The schema is closed: columns or
    cached keys beyond symbol/price/change are dropped, so the response
    body is always exactly these three fields. Prices serialize as JSON
    floats (150 -> 150.0).
    """

    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    symbol: str
    price: float
    change: float
