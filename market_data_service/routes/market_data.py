"""Market data endpoint.

GET /market-data/{symbol} -> latest snapshot for the symbol.

Flow:
1. Cache hit -> 200 with the cached snapshot
2. Cache miss -> read market_data row, cache it for 5 minutes, 200
3. No row -> 404 "Not found"
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from market_data_service.schemas import MarketRecord
from market_data_service.services import MarketDataService, SymbolNotFoundError

router = APIRouter()


def get_market_data_service(request: Request) -> MarketDataService:
    """Return the service built during application startup."""
    service = getattr(request.app.state, "market_data_service", None)
    if service is None:
        raise RuntimeError("Market data service not initialized. Check application lifespan.")
    return service


@router.get(
    "/market-data/{symbol}",
    response_model=MarketRecord,
    responses={404: {"description": "No market data for the symbol"}},
)
async def get_market_data(
    symbol: str,
    service: Annotated[MarketDataService, Depends(get_market_data_service)],
) -> MarketRecord | PlainTextResponse:
    """Get market data for a symbol.

    Args:
        symbol: Ticker symbol, passed through without format validation.

    Returns:
        MarketRecord JSON, or a plain-text 404 if the symbol is unknown.
    """
    try:
        return await service.get_market_data(symbol)
    except SymbolNotFoundError:
        return PlainTextResponse("Not found", status_code=404)
