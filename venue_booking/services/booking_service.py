"""
Booking service with conflict-safe seat reservation.

CONCURRENCY STRATEGY: Optimistic Check + Unique Constraint
==========================================================

Problem:
  Two operators book seat "7" for the same night at the same moment.
  Both look up (night, "7"), both find nothing, both insert.
  Result: Double-booked seat.

Solution:
  reserved_seats carries UNIQUE(night_id, seat_id).

  1. Reject duplicate seat ids inside the request
  2. Look up every requested seat in the (night_id, seat_id) index and
     report *all* that are already taken
  3. INSERT the booking and one reserved_seats row per seat in the
     request's transaction
  4. The inserts run inside a SAVEPOINT. If a seat INSERT hits the unique
     constraint, another transaction won the race: roll back to the
     savepoint, re-read which seats are now taken and raise the same
     SeatConflictError the pre-check would have raised. Work the caller
     did earlier in the same session is kept. Any other integrity error
     propagates unchanged

  The pre-check gives a complete conflict list in the common case; the
  constraint is the actual guarantee. No explicit locks are taken.

Cancellation deletes the booking and its reserved_seats rows in one
transaction, so readers never see seat rows without a booking.
"""

import time
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Sequence

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from venue_booking.models.night import Night
from venue_booking.models.booking import Booking
from venue_booking.models.reserved_seat import ReservedSeat
from venue_booking.core.exceptions import (
    DuplicateSeatError,
    EmptyBookingError,
    NotFoundError,
    SeatConflictError,
)
from venue_booking.core.logging import get_logger
from venue_booking.core.metrics import booking_latency, record_booking_attempt, record_booking_deletion, record_db_operation

logger = get_logger(__name__)

SEAT_UNIQUE_CONSTRAINT = "uq_reserved_seat_night_seat"
# SQLite reports the columns instead of the constraint name
_SEAT_UNIQUE_COLUMNS = "reserved_seats.night_id, reserved_seats.seat_id"


def is_seat_conflict(exc: IntegrityError) -> bool:
    """True when ``exc`` is a violation of the (night_id, seat_id) unique constraint."""
    message = str(exc.orig)
    return SEAT_UNIQUE_CONSTRAINT in message or _SEAT_UNIQUE_COLUMNS in message


def _seat_pair(seat: Any) -> tuple[str, str]:
    """Accept SeatSelection models as well as plain dicts."""
    if isinstance(seat, dict):
        return seat["seat_id"], seat["table_id"]
    return seat.seat_id, seat.table_id


async def find_reserved_seat_ids(
    db: AsyncSession,
    night_id: int,
    seat_ids: Sequence[str],
) -> list[str]:
    """Return the subset of ``seat_ids`` already reserved for the night, in request order."""
    if not seat_ids:
        return []
    result = await db.execute(
        select(ReservedSeat.seat_id).where(
            ReservedSeat.night_id == night_id,
            ReservedSeat.seat_id.in_(seat_ids),
        )
    )
    record_db_operation("read")
    taken = set(result.scalars().all())
    return [seat_id for seat_id in seat_ids if seat_id in taken]


async def create_booking(
    db: AsyncSession,
    night_id: int,
    customer_name: str,
    customer_phone: str,
    seats: Iterable[Any],
    notes: Optional[str] = None,
) -> int:
    """
    Reserve ``seats`` for a night and return the new booking id.

    Raises EmptyBookingError, DuplicateSeatError, NotFoundError (unknown
    night) or SeatConflictError. Nothing is written unless every seat is
    reserved.
    """
    started = time.perf_counter()
    try:
        return await _create_booking(db, night_id, customer_name, customer_phone, seats, notes)
    finally:
        booking_latency.observe(time.perf_counter() - started)


async def _create_booking(
    db: AsyncSession,
    night_id: int,
    customer_name: str,
    customer_phone: str,
    seats: Iterable[Any],
    notes: Optional[str],
) -> int:
    pairs = [_seat_pair(seat) for seat in seats]
    if not pairs:
        record_booking_attempt("empty")
        raise EmptyBookingError()

    seat_ids = [seat_id for seat_id, _ in pairs]
    table_ids = [table_id for _, table_id in pairs]

    duplicates = [seat_id for seat_id, count in Counter(seat_ids).items() if count > 1]
    if duplicates:
        logger.warning("booking_rejected_duplicate_seats", night_id=night_id, seat_ids=duplicates)
        record_booking_attempt("duplicate")
        raise DuplicateSeatError(duplicates)

    night = await db.get(Night, night_id)
    if night is None:
        record_booking_attempt("not_found")
        raise NotFoundError("Night", night_id)

    conflicts = await find_reserved_seat_ids(db, night_id, seat_ids)
    if conflicts:
        logger.warning("booking_conflict", night_id=night_id, conflicting_seat_ids=conflicts)
        record_booking_attempt("conflict")
        raise SeatConflictError(conflicts)

    now = datetime.now(timezone.utc)
    booking = Booking(
        night_id=night_id,
        customer_name=customer_name,
        customer_phone=customer_phone,
        seat_ids=seat_ids,
        table_ids=table_ids,
        status="confirmed",
        notes=notes,
        created_at=now,
    )
    try:
        async with db.begin_nested():
            db.add(booking)
            await db.flush()
            db.add_all(
                ReservedSeat(
                    night_id=night_id,
                    booking_id=booking.id,
                    table_id=table_id,
                    seat_id=seat_id,
                    created_at=now,
                )
                for seat_id, table_id in pairs
            )
            await db.flush()
    except IntegrityError as exc:
        record_db_operation("rollback")
        if not is_seat_conflict(exc):
            logger.error("booking_insert_failed", night_id=night_id, error=str(exc.orig))
            record_booking_attempt("error")
            raise
        # Lost the race; only the savepoint was rolled back
        conflicts = await find_reserved_seat_ids(db, night_id, seat_ids)
        logger.warning(
            "booking_race_lost",
            night_id=night_id,
            conflicting_seat_ids=conflicts,
            error=str(exc.orig),
        )
        record_booking_attempt("race_lost")
        raise SeatConflictError(conflicts or seat_ids) from exc

    record_db_operation("write")
    record_booking_attempt("success", seat_count=len(pairs))
    logger.info(
        "booking_created",
        booking_id=booking.id,
        night_id=night_id,
        seat_ids=seat_ids,
        seats=len(pairs),
    )
    return booking.id


async def delete_booking(db: AsyncSession, booking_id: int) -> None:
    """
    Delete a booking and release its seats.
    A second call for the same id raises NotFoundError.
    """
    booking = await db.get(Booking, booking_id)
    if booking is None:
        record_booking_deletion(False)
        raise NotFoundError("Booking", booking_id)

    night_id = booking.night_id
    released = await db.execute(
        delete(ReservedSeat).where(ReservedSeat.booking_id == booking_id)
    )
    await db.delete(booking)
    await db.flush()
    record_db_operation("write")
    record_booking_deletion(True)

    logger.info(
        "booking_deleted",
        booking_id=booking_id,
        night_id=night_id,
        seats_released=released.rowcount,
    )


async def get_booking(db: AsyncSession, booking_id: int) -> Optional[Booking]:
    return await db.get(Booking, booking_id)


async def list_bookings_by_night(db: AsyncSession, night_id: int) -> list[Booking]:
    """Bookings for a night, newest first; equal timestamps fall back to id order."""
    result = await db.execute(
        select(Booking)
        .where(Booking.night_id == night_id)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    record_db_operation("read")
    return list(result.scalars().all())


async def list_reserved_seats_by_night(db: AsyncSession, night_id: int) -> list[dict]:
    """
    Reserved seats for a night, each with the owning booking's customer name.
    The name is looked up at read time; a missing booking yields None.
    """
    result = await db.execute(
        select(ReservedSeat, Booking.customer_name)
        .outerjoin(Booking, Booking.id == ReservedSeat.booking_id)
        .where(ReservedSeat.night_id == night_id)
        .order_by(ReservedSeat.id.asc())
    )
    record_db_operation("read")
    return [
        {
            "id": seat.id,
            "night_id": seat.night_id,
            "booking_id": seat.booking_id,
            "table_id": seat.table_id,
            "seat_id": seat.seat_id,
            "created_at": seat.created_at,
            "booking_customer_name": customer_name,
        }
        for seat, customer_name in result.all()
    ]
