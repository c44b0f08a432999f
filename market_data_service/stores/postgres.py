"""PostgreSQL store with async SQLAlchemy.

Handles:
- Engine and session factory construction
- Single-row market_data lookups by symbol
- Connection pooling
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from market_data_service.schemas import MarketRecord


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create the async engine (connection pool) for the record store."""
    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to `engine`."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


class PostgresRecordStore:
    """Record store reading the `market_data` table."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._engine = engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get database session context manager.

        Usage:
            async with store.session() as session:
                result = await session.execute(query)
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def find_by_symbol(self, symbol: str) -> MarketRecord | None:
        """Look up the row for `symbol`.

        Args:
            symbol: Unique symbol key, used verbatim.

        Returns:
            Validated record, or None if no row matches.
        """
        # Imported here: models depend on this module for `Base`.
        from market_data_service.models import MarketData

        async with self.session() as session:
            result = await session.execute(select(MarketData).where(MarketData.symbol == symbol))
            row = result.scalar_one_or_none()

        if row is None:
            return None
        return MarketRecord.model_validate(row)

    async def ping(self) -> None:
        """Run a trivial query to validate connectivity."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))

    async def close(self) -> None:
        """Close database connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables (for development/seeding only)."""
    from market_data_service import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
