"""
Night lookups. Nights are seeded data; nothing here mutates them except
``seed_nights``, which is only used by the seed script and tests.
"""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from venue_booking.models.night import Night
from venue_booking.core.logging import get_logger
from venue_booking.core.metrics import record_db_operation

logger = get_logger(__name__)

DEFAULT_NIGHTS = [
    {
        "short_id": "1",
        "title": "Night 1",
        "date": "Sabato 15 Marzo 2025",
        "time": "20:00",
        "color": "bg-blue-600",
        "hover_color": "hover:bg-blue-700",
        "is_active": True,
    },
    {
        "short_id": "2",
        "title": "Night 2",
        "date": "Domenica 16 Marzo 2025",
        "time": "20:00",
        "color": "bg-purple-600",
        "hover_color": "hover:bg-purple-700",
        "is_active": True,
    },
]


def sort_nights(nights: Iterable[Night]) -> list[Night]:
    """Active nights first (a missing flag counts as active), then by short_id."""
    return sorted(nights, key=lambda night: (not night.active, str(night.short_id)))


async def get_by_short_id(db: AsyncSession, short_id: str) -> Optional[Night]:
    result = await db.execute(select(Night).where(Night.short_id == short_id))
    record_db_operation("read")
    return result.scalar_one_or_none()


async def get_by_id(db: AsyncSession, night_id: int) -> Optional[Night]:
    return await db.get(Night, night_id)


async def list_all(db: AsyncSession) -> list[Night]:
    result = await db.execute(select(Night))
    record_db_operation("read")
    return sort_nights(result.scalars().all())


async def seed_nights(db: AsyncSession, nights: Iterable[dict] = DEFAULT_NIGHTS) -> list[Night]:
    """Insert nights whose short_id is not present yet. Returns the inserted rows."""
    existing = set((await db.execute(select(Night.short_id))).scalars().all())
    created = []
    for data in nights:
        if data["short_id"] in existing:
            continue
        night = Night(**data)
        db.add(night)
        created.append(night)
        existing.add(data["short_id"])
    await db.flush()
    record_db_operation("write")

    logger.info("nights_seeded", created=[n.short_id for n in created])
    return created
