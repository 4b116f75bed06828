"""
Pydantic schemas for the venue seat map.
"""

from pydantic import BaseModel


class TableSeats(BaseModel):
    table_id: str
    seat_ids: list[str]


class SeatMapResponse(BaseModel):
    tables: list[TableSeats]
    total_seats: int
