"""
Booking domain exceptions.

Services raise these instead of HTTPException so the same errors surface
whether an operation is called from a route, a script or a test.
``register_exception_handlers`` maps them onto JSON error responses.
"""

from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from venue_booking.core.logging import get_logger

logger = get_logger(__name__)


class BookingError(Exception):
    """Base class for errors a booking request can terminate with."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "BOOKING_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EmptyBookingError(BookingError):
    code = "EMPTY_BOOKING"

    def __init__(self):
        super().__init__("A booking must reserve at least one seat")


class DuplicateSeatError(BookingError):
    code = "DUPLICATE_SEAT"

    def __init__(self, seat_ids: Iterable[str]):
        seat_ids = sorted(set(seat_ids))
        super().__init__(
            "Duplicate seat ids provided in the same booking request",
            details={"duplicate_seat_ids": seat_ids},
        )
        self.seat_ids = seat_ids


class SeatConflictError(BookingError):
    status_code = status.HTTP_409_CONFLICT
    code = "SEAT_CONFLICT"

    def __init__(self, conflicting_seat_ids: Iterable[str]):
        self.conflicting_seat_ids = list(conflicting_seat_ids)
        super().__init__(
            "One or more seats are already reserved: " + ", ".join(self.conflicting_seat_ids),
            details={"conflicting_seat_ids": self.conflicting_seat_ids},
        )


class NotFoundError(BookingError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} {identifier} not found"
        super().__init__(message, details={"resource": resource, "id": identifier})


def _error_body(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> dict:
    return {"error": {"code": code, "message": message, "details": details or {}}}


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    logger.info(
        "request_rejected",
        code=exc.code,
        status_code=exc.status_code,
        message=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, exc.details),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", error=str(exc), exc_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", "An internal server error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
