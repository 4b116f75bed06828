"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from venue_booking.api.routes import nights, bookings, reserved_seats, seat_map

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(nights.router)
api_router.include_router(bookings.router)
api_router.include_router(reserved_seats.router)
api_router.include_router(seat_map.router)
