from venue_booking.schemas.night import NightResponse, NightListResponse
from venue_booking.schemas.booking import (
    SeatSelection, BookingCreate, BookingCreatedResponse, BookingResponse,
    BookingDeleteResponse, ReservedSeatResponse,
)
from venue_booking.schemas.seat_map import TableSeats, SeatMapResponse

__all__ = [
    "NightResponse", "NightListResponse",
    "SeatSelection", "BookingCreate", "BookingCreatedResponse", "BookingResponse",
    "BookingDeleteResponse", "ReservedSeatResponse",
    "TableSeats", "SeatMapResponse",
]
