"""
ReservedSeat: one row per booked seat per night.

The unique constraint on (night_id, seat_id) is what actually prevents
double-booking. The service's pre-check only produces a friendlier error;
two concurrent writers that both pass it are separated here, and the loser's
INSERT fails with an IntegrityError.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint, Index

from venue_booking.db.base import Base, TimestampMixin


class ReservedSeat(Base, TimestampMixin):
    __tablename__ = "reserved_seats"

    id = Column(Integer, primary_key=True, index=True)
    night_id = Column(Integer, ForeignKey("nights.id"), nullable=False)
    booking_id = Column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE", name="fk_reserved_seats_booking_id"),
        nullable=False,
    )
    table_id = Column(String(32), nullable=False)
    # Opaque global seat id, unique per night
    seat_id = Column(String(32), nullable=False)

    __table_args__ = (
        UniqueConstraint("night_id", "seat_id", name="uq_reserved_seat_night_seat"),
        Index("ix_reserved_seats_night_id", "night_id"),
        Index("ix_reserved_seats_booking_id", "booking_id"),
    )

    def __repr__(self) -> str:
        return f"<ReservedSeat(night={self.night_id}, seat={self.seat_id}, booking={self.booking_id})>"
