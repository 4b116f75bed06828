"""
Seed the default nights.

Usage:
    python -m venue_booking.seed            # insert missing nights
    python -m venue_booking.seed --create   # also create tables (dev/SQLite)
"""

import argparse
import asyncio

from venue_booking.core.logging import setup_logging, get_logger
from venue_booking.db.base import Base
from venue_booking.db.session import AsyncSessionLocal, engine
from venue_booking.models import Night, Booking, ReservedSeat  # noqa: F401 - register tables
from venue_booking.services.cache_service import close_redis, invalidate_night_cache
from venue_booking.services.night_service import seed_nights


async def main(create_tables: bool) -> None:
    setup_logging()
    logger = get_logger(__name__)

    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("tables_created")

    async with AsyncSessionLocal() as session:
        created = await seed_nights(session)
        await session.commit()

    await invalidate_night_cache()
    await close_redis()
    await engine.dispose()
    logger.info("seed_complete", nights_created=len(created))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--create", action="store_true", help="create tables before seeding")
    args = parser.parse_args()
    asyncio.run(main(args.create))
