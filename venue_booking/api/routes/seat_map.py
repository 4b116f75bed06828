"""
Static venue layout: table id -> seat ids.
"""

from fastapi import APIRouter

from venue_booking.schemas.seat_map import SeatMapResponse, TableSeats
from venue_booking.services.seat_map import seat_map, table_id_to_seat_ids
from venue_booking.core.exceptions import NotFoundError

router = APIRouter(prefix="/seat-map", tags=["Seat Map"])


@router.get("/", response_model=SeatMapResponse)
async def get_seat_map_endpoint():
    tables = [TableSeats(table_id=t, seat_ids=s) for t, s in seat_map().items()]
    return SeatMapResponse(tables=tables, total_seats=sum(len(t.seat_ids) for t in tables))


@router.get("/{table_id}", response_model=TableSeats)
async def get_table_seats_endpoint(table_id: str):
    seat_ids = table_id_to_seat_ids(table_id)
    if seat_ids is None:
        raise NotFoundError("Table", table_id)
    return TableSeats(table_id=table_id, seat_ids=seat_ids)
