"""API routes."""

from fastapi import APIRouter

from market_data_service.routes import market_data

api_router = APIRouter()

# Market data lookup (cache-aside)
api_router.include_router(market_data.router, tags=["market-data"])
