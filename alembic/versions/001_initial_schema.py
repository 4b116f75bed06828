"""Initial schema: nights, bookings, reserved_seats with the per-night seat constraint.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Nights table (seeded, read-only for the booking engine)
    op.create_table(
        "nights",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("short_id", sa.String(32), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("date", sa.String(100), nullable=False),
        sa.Column("time", sa.String(20), nullable=False),
        sa.Column("color", sa.String(50), nullable=False),
        sa.Column("hover_color", sa.String(50), nullable=False, server_default=sa.text("''")),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_nights_id", "nights", ["id"])
    op.create_index("ix_nights_short_id", "nights", ["short_id"], unique=True)
    op.create_index("ix_nights_is_active", "nights", ["is_active"])

    # Bookings table
    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("night_id", sa.Integer(), sa.ForeignKey("nights.id"), nullable=False),
        sa.Column("customer_name", sa.String(255), nullable=False),
        sa.Column("customer_phone", sa.String(50), nullable=False),
        sa.Column("seat_ids", sa.JSON(), nullable=False),
        sa.Column("table_ids", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'confirmed'")),
        sa.Column("notes", sa.String(1000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("status IN ('confirmed', 'cancelled')", name="check_booking_status"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_night_id_created_at", "bookings", ["night_id", "created_at"])
    op.create_index("ix_bookings_night_id_status", "bookings", ["night_id", "status"])

    # Reserved seats: one row per booked seat per night
    op.create_table(
        "reserved_seats",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("night_id", sa.Integer(), sa.ForeignKey("nights.id"), nullable=False),
        sa.Column(
            "booking_id",
            sa.Integer(),
            sa.ForeignKey("bookings.id", ondelete="CASCADE", name="fk_reserved_seats_booking_id"),
            nullable=False,
        ),
        sa.Column("table_id", sa.String(32), nullable=False),
        sa.Column("seat_id", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        # A seat can be held by at most one booking per night. The loser of
        # two concurrent inserts gets a unique violation here.
        sa.UniqueConstraint("night_id", "seat_id", name="uq_reserved_seat_night_seat"),
    )
    op.create_index("ix_reserved_seats_id", "reserved_seats", ["id"])
    op.create_index("ix_reserved_seats_night_id", "reserved_seats", ["night_id"])
    op.create_index("ix_reserved_seats_booking_id", "reserved_seats", ["booking_id"])


def downgrade() -> None:
    op.drop_table("reserved_seats")
    op.drop_table("bookings")
    op.drop_table("nights")
