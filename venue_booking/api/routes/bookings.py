"""
Booking endpoints: create, inspect and cancel seat reservations.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from venue_booking.db.session import get_db
from venue_booking.schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingDeleteResponse,
    BookingResponse,
)
from venue_booking.services.booking_service import (
    create_booking,
    delete_booking,
    get_booking,
    list_bookings_by_night,
)
from venue_booking.core.exceptions import NotFoundError

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Reserve one or more seats for a night.

    Returns 400 for an empty seat list or a seat listed twice, 404 for an
    unknown night and 409 with every conflicting seat id when any seat is
    already reserved (including when a concurrent booking wins the race).
    """
    booking_id = await create_booking(
        db,
        night_id=booking_data.night_id,
        customer_name=booking_data.customer_name,
        customer_phone=booking_data.customer_phone,
        seats=booking_data.seats,
        notes=booking_data.notes,
    )
    return BookingCreatedResponse(booking_id=booking_id)


@router.get("/", response_model=list[BookingResponse])
async def list_bookings_endpoint(
    night_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    """Bookings for a night, newest first."""
    return await list_bookings_by_night(db, night_id)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking_endpoint(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    booking = await get_booking(db, booking_id)
    if booking is None:
        raise NotFoundError("Booking", booking_id)
    return booking


@router.delete("/{booking_id}", response_model=BookingDeleteResponse)
async def delete_booking_endpoint(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Cancel a booking and release its seats. Deleted bookings cannot be restored."""
    await delete_booking(db, booking_id)
    return BookingDeleteResponse(
        message="Booking deleted successfully",
        booking_id=booking_id,
    )
