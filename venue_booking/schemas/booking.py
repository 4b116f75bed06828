"""
Pydantic schemas for booking-related request/response validation.

Duplicate and conflicting seats are not rejected here: those checks live in
the booking service so that every caller gets the same domain errors.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


MAX_SEATS_PER_BOOKING = 64


class SeatSelection(BaseModel):
    seat_id: str = Field(..., min_length=1, max_length=32)
    table_id: str = Field(..., min_length=1, max_length=32)


class BookingCreate(BaseModel):
    night_id: int
    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_phone: str = Field(..., min_length=1, max_length=50)
    seats: list[SeatSelection] = Field(..., max_length=MAX_SEATS_PER_BOOKING)
    notes: Optional[str] = Field(None, max_length=1000)


class BookingCreatedResponse(BaseModel):
    booking_id: int


class BookingResponse(BaseModel):
    id: int
    night_id: int
    customer_name: str
    customer_phone: str
    seat_ids: list[str]
    table_ids: list[str]
    status: str
    notes: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class BookingDeleteResponse(BaseModel):
    message: str
    booking_id: int


class ReservedSeatResponse(BaseModel):
    id: int
    night_id: int
    booking_id: int
    table_id: str
    seat_id: str
    created_at: datetime
    booking_customer_name: Optional[str] = None
