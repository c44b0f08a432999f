#!/usr/bin/env python3
"""Seed database with sample market data.

Creates:
- The market_data table (if missing)
- One row per sample symbol

Seed script is idempotent (existing rows are updated to the seed values).
Cached snapshots in Redis are not touched and may stay stale for up to
5 minutes after reseeding.

Usage:
    python -m scripts.seed
"""

import asyncio

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from market_data_service.models import MarketData
from market_data_service.settings import get_settings
from market_data_service.stores.postgres import create_engine, create_session_factory, create_tables

SAMPLE_MARKET_DATA = [
    {"symbol": "AAPL", "price": 150.0, "change": 1.2},
    {"symbol": "GOOGL", "price": 2800.0, "change": -0.5},
    {"symbol": "MSFT", "price": 330.0, "change": 0.8},
    {"symbol": "AMZN", "price": 135.0, "change": -1.1},
]


async def seed_market_data(session: AsyncSession) -> None:
    """Insert or update each sample row."""
    for row in SAMPLE_MARKET_DATA:
        result = await session.execute(
            select(MarketData).where(MarketData.symbol == row["symbol"])
        )
        existing = result.scalar_one_or_none()

        if existing:
            existing.price = row["price"]
            existing.change = row["change"]
            print(f"  updated {row['symbol']} ({row['price']}, {row['change']}%)")
        else:
            session.add(MarketData(**row))
            print(f"  created {row['symbol']} ({row['price']}, {row['change']}%)")


async def seed_database() -> None:
    """Seed database with initial data."""
    load_dotenv()
    settings = get_settings()

    engine = create_engine(settings.async_database_url)
    await create_tables(engine)
    async_session = create_session_factory(engine)

    async with async_session() as session:
        print("Seeding market_data...")
        await seed_market_data(session)
        await session.commit()
        print("Database seeded successfully!")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_database())
