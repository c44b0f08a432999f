"""Market data model.

One row per ticker symbol, written by an external feed (or the seed script).
The service only reads it.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from market_data_service.stores.postgres import Base


class MarketData(Base):
    """Latest market snapshot for a symbol."""

    __tablename__ = "market_data"

    # Ticker symbol (e.g., "AAPL")
    symbol: Mapped[str] = mapped_column(String(20), primary_key=True)

    price: Mapped[float] = mapped_column()
    change: Mapped[float] = mapped_column(default=0.0)  # percent

    def __repr__(self) -> str:
        return f"<MarketData {self.symbol}>"
