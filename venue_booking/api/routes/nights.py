"""
Night endpoints. The listing is cached in Redis; single lookups are not.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from venue_booking.db.session import get_db
from venue_booking.schemas.night import NightResponse, NightListResponse
from venue_booking.services.night_service import get_by_id, get_by_short_id, list_all
from venue_booking.services.cache_service import get_cached_nights, set_cached_nights
from venue_booking.core.exceptions import NotFoundError
from venue_booking.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/nights", tags=["Nights"])


@router.get("/", response_model=NightListResponse)
async def list_nights_endpoint(db: AsyncSession = Depends(get_db)):
    """All nights, active first, then by short id."""
    cached = await get_cached_nights()
    if cached:
        logger.info("nights_list_cache_hit")
        cached["cached"] = True
        return NightListResponse(**cached)

    nights = await list_all(db)
    response_data = {
        "nights": [NightResponse.model_validate(n).model_dump() for n in nights],
        "total": len(nights),
        "cached": False,
    }
    await set_cached_nights(response_data)

    return NightListResponse(**response_data)


@router.get("/by-id/{night_id}", response_model=NightResponse)
async def get_night_by_id_endpoint(
    night_id: int,
    db: AsyncSession = Depends(get_db),
):
    night = await get_by_id(db, night_id)
    if night is None:
        raise NotFoundError("Night", night_id)
    return night


@router.get("/{short_id}", response_model=NightResponse)
async def get_night_endpoint(
    short_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Look up a night by the short id used in its URL."""
    night = await get_by_short_id(db, short_id)
    if night is None:
        raise NotFoundError("Night", short_id)
    return night
