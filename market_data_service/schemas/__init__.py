"""Pydantic schemas for API request/response validation."""

from market_data_service.schemas.common import ErrorDetail, ErrorResponse
from market_data_service.schemas.market import MarketRecord

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "MarketRecord",
]
