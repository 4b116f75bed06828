"""
Booking model representing a customer's reservation of seats for one night.

Key design decisions:
- seat_ids / table_ids are kept on the booking in request order for display;
  the authoritative per-seat records live in ReservedSeat
- Status models a soft-cancel path, but cancellation deletes the booking
  and its reserved seats outright
"""

from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint, Index, JSON

from venue_booking.db.base import Base, TimestampMixin

BOOKING_STATUSES = ("confirmed", "cancelled")


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    night_id = Column(Integer, ForeignKey("nights.id"), nullable=False)
    customer_name = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=False)
    seat_ids = Column(JSON, nullable=False, default=list)
    table_ids = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default="confirmed")  # confirmed, cancelled
    notes = Column(String(1000), nullable=True)

    __table_args__ = (
        CheckConstraint("status IN ('confirmed', 'cancelled')", name="check_booking_status"),
        # Listing a night's bookings newest first
        Index("ix_bookings_night_id_created_at", "night_id", "created_at"),
        Index("ix_bookings_night_id_status", "night_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, night={self.night_id}, seats={self.seat_ids}, status={self.status})>"
