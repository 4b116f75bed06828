"""
Tests for booking and reserved-seat endpoints.
"""

import pytest
from httpx import AsyncClient


def booking_payload(night_id: int, *seat_ids: str, table_id: str = "T1", **extra) -> dict:
    payload = {
        "night_id": night_id,
        "customer_name": "Mario Rossi",
        "customer_phone": "+39 333 1234567",
        "seats": [{"seat_id": s, "table_id": table_id} for s in seat_ids],
    }
    payload.update(extra)
    return payload


@pytest.mark.asyncio
async def test_create_booking(client: AsyncClient, test_night):
    """Successful booking returns its id and shows up in the reserved seats."""
    response = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "1", "2"))
    assert response.status_code == 201
    booking_id = response.json()["booking_id"]

    seats_response = await client.get("/api/v1/reserved-seats/", params={"night_id": test_night.id})
    assert seats_response.status_code == 200
    data = seats_response.json()
    assert sorted(s["seat_id"] for s in data) == ["1", "2"]
    assert all(s["booking_id"] == booking_id for s in data)
    assert all(s["booking_customer_name"] == "Mario Rossi" for s in data)


@pytest.mark.asyncio
async def test_create_booking_duplicate_seat(client: AsyncClient, test_night):
    """Same seat twice in one request returns 400 and reserves nothing."""
    response = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "5", "5"))
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "DUPLICATE_SEAT"

    seats_response = await client.get("/api/v1/reserved-seats/", params={"night_id": test_night.id})
    assert seats_response.json() == []


@pytest.mark.asyncio
async def test_create_booking_empty_seats(client: AsyncClient, test_night):
    response = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id))
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EMPTY_BOOKING"


@pytest.mark.asyncio
async def test_create_booking_conflict(client: AsyncClient, test_night):
    """Already reserved seat returns 409 listing the conflicting seat ids."""
    first = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "42", table_id="T6"))
    assert first.status_code == 201

    response = await client.post(
        "/api/v1/bookings/",
        json=booking_payload(test_night.id, "41", "42", table_id="T6"),
    )
    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "SEAT_CONFLICT"
    assert error["details"]["conflicting_seat_ids"] == ["42"]

    bookings = await client.get("/api/v1/bookings/", params={"night_id": test_night.id})
    assert len(bookings.json()) == 1


@pytest.mark.asyncio
async def test_create_booking_unknown_night(client: AsyncClient):
    response = await client.post("/api/v1/bookings/", json=booking_payload(99999, "1"))
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_create_booking_missing_customer_name(client: AsyncClient, test_night):
    response = await client.post(
        "/api/v1/bookings/",
        json=booking_payload(test_night.id, "1", customer_name=""),
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_booking(client: AsyncClient, test_night):
    create = await client.post(
        "/api/v1/bookings/",
        json=booking_payload(test_night.id, "89", "90", table_id="T12", notes="Birthday"),
    )
    booking_id = create.json()["booking_id"]

    response = await client.get(f"/api/v1/bookings/{booking_id}")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == booking_id
    assert data["night_id"] == test_night.id
    assert data["seat_ids"] == ["89", "90"]
    assert data["table_ids"] == ["T12", "T12"]
    assert data["status"] == "confirmed"
    assert data["notes"] == "Birthday"


@pytest.mark.asyncio
async def test_get_booking_not_found(client: AsyncClient):
    response = await client.get("/api/v1/bookings/99999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_booking(client: AsyncClient, test_night):
    """Deleting releases the seats; deleting again returns 404."""
    create = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "3", "4"))
    booking_id = create.json()["booking_id"]

    response = await client.delete(f"/api/v1/bookings/{booking_id}")
    assert response.status_code == 200
    assert response.json()["booking_id"] == booking_id

    seats_response = await client.get("/api/v1/reserved-seats/", params={"night_id": test_night.id})
    assert seats_response.json() == []

    again = await client.delete(f"/api/v1/bookings/{booking_id}")
    assert again.status_code == 404

    rebook = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "3"))
    assert rebook.status_code == 201


@pytest.mark.asyncio
async def test_list_bookings_by_night(client: AsyncClient, test_night, other_night):
    """Only the requested night's bookings, newest first."""
    first = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "1"))
    second = await client.post("/api/v1/bookings/", json=booking_payload(test_night.id, "2"))
    await client.post("/api/v1/bookings/", json=booking_payload(other_night.id, "1"))

    response = await client.get("/api/v1/bookings/", params={"night_id": test_night.id})
    assert response.status_code == 200
    ids = [b["id"] for b in response.json()]
    assert ids == [second.json()["booking_id"], first.json()["booking_id"]]


@pytest.mark.asyncio
async def test_list_bookings_requires_night(client: AsyncClient):
    response = await client.get("/api/v1/bookings/")
    assert response.status_code == 422
