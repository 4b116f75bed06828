"""
Reserved seat state for the floor plan. Never cached: every client must
see seats the moment they are booked or released.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from venue_booking.db.session import get_db
from venue_booking.schemas.booking import ReservedSeatResponse
from venue_booking.services.booking_service import list_reserved_seats_by_night

router = APIRouter(prefix="/reserved-seats", tags=["Reserved Seats"])


@router.get("/", response_model=list[ReservedSeatResponse])
async def list_reserved_seats_endpoint(
    night_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await list_reserved_seats_by_night(db, night_id)
