"""
Tests for health, metrics and request correlation.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["cache"] == {"status": "disabled"}


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert response.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_metrics_count_booking_outcomes(client: AsyncClient, test_night):
    payload = {
        "night_id": test_night.id,
        "customer_name": "A",
        "customer_phone": "1",
        "seats": [{"seat_id": "1", "table_id": "T1"}],
    }
    await client.post("/api/v1/bookings/", json=payload)
    await client.post("/api/v1/bookings/", json=payload)

    response = await client.get("/metrics")
    assert response.status_code == 200
    assert 'booking_attempts_total{status="success"}' in response.text
    assert 'booking_attempts_total{status="conflict"}' in response.text
