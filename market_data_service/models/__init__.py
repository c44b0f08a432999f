"""SQLAlchemy ORM models.

Models represent database tables:
- market_data: latest price/change snapshot per symbol
"""

from market_data_service.models.market_data import MarketData

__all__ = ["MarketData"]
