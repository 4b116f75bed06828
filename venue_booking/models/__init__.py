from venue_booking.models.night import Night
from venue_booking.models.booking import Booking
from venue_booking.models.reserved_seat import ReservedSeat

__all__ = ["Night", "Booking", "ReservedSeat"]
