"""
Tests for the seat map registry.
"""

import pytest
from httpx import AsyncClient

from venue_booking.services.seat_map import seat_map, table_id_to_seat_ids, table_ids


def test_table_seat_ranges():
    assert table_id_to_seat_ids("T1") == [str(n) for n in range(1, 9)]
    assert table_id_to_seat_ids("T12") == [str(n) for n in range(89, 105)]
    assert table_id_to_seat_ids("T31") == [str(n) for n in range(361, 373)]
    assert table_id_to_seat_ids("T32") == [str(n) for n in range(373, 381)]
    assert table_id_to_seat_ids("T40") == [str(n) for n in range(493, 509)]


def test_unknown_tables():
    assert table_id_to_seat_ids("T41") is None
    assert table_id_to_seat_ids("X1") is None
    assert table_id_to_seat_ids("") is None


def test_seat_ids_unique_across_venue():
    all_seats = [seat for seats in seat_map().values() for seat in seats]
    assert len(all_seats) == len(set(all_seats))
    assert len(table_ids()) == 40


@pytest.mark.asyncio
async def test_seat_map_endpoints(client: AsyncClient):
    response = await client.get("/api/v1/seat-map/")
    assert response.status_code == 200
    data = response.json()
    assert len(data["tables"]) == 40
    assert data["total_seats"] == sum(len(t["seat_ids"]) for t in data["tables"])

    table = await client.get("/api/v1/seat-map/T32")
    assert table.json() == {"table_id": "T32", "seat_ids": [str(n) for n in range(373, 381)]}

    missing = await client.get("/api/v1/seat-map/T99")
    assert missing.status_code == 404
