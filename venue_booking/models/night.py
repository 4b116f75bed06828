"""
Night model: one scheduled event with its own seat-reservation namespace.

Nights are seeded out-of-band; the booking engine only reads them.
"""

from sqlalchemy import Column, Integer, String, Boolean, Index

from venue_booking.db.base import Base, TimestampMixin


class Night(Base, TimestampMixin):
    __tablename__ = "nights"

    id = Column(Integer, primary_key=True, index=True)
    # Human-facing URL token ("1", "2", ...)
    short_id = Column(String(32), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(String(100), nullable=False)
    time = Column(String(20), nullable=False)
    color = Column(String(50), nullable=False)
    hover_color = Column(String(50), nullable=False, default="")
    # NULL means active
    is_active = Column(Boolean, nullable=True)

    __table_args__ = (
        Index("ix_nights_is_active", "is_active"),
    )

    @property
    def active(self) -> bool:
        return True if self.is_active is None else bool(self.is_active)

    def __repr__(self) -> str:
        return f"<Night(id={self.id}, short_id={self.short_id}, title={self.title})>"
