"""
Locust Load Test Suite

Requires a seeded database (python -m venue_booking.seed).

Run scenarios:
  locust -f locustfile.py --tags contention   # Operators fighting for the same seats
  locust -f locustfile.py --tags throughput   # Floor plan polling
  locust -f locustfile.py --tags edge         # Bad input
  locust -f locustfile.py                     # All tests

After a contention run, verify no seat was double-booked:
  SELECT night_id, seat_id, COUNT(*) FROM reserved_seats
  GROUP BY night_id, seat_id HAVING COUNT(*) > 1;
Should return no rows.
"""

import random
from locust import HttpUser, task, between, tag

NIGHT_SHORT_ID = "1"
# Table T1 only: 8 seats for every contention user
CONTENDED_TABLE = "T1"
CONTENDED_SEATS = [str(n) for n in range(1, 9)]


def resolve_night_id(client) -> int | None:
    resp = client.get(f"/api/v1/nights/{NIGHT_SHORT_ID}", name="/api/v1/nights/{short_id}")
    if resp.status_code == 200:
        return resp.json()["id"]
    return None


class ContentionUser(HttpUser):
    """
    TEST 1: Contention - many operators, 8 seats

    Run: locust -f locustfile.py --tags contention -u 100 -r 50 --run-time 30s

    Expected: a handful of 201s, everything else 409 with conflicting_seat_ids.
    Any 5xx means the unique constraint violation leaked instead of being
    mapped to a conflict.
    """
    wait_time = between(0, 0.1)

    def on_start(self):
        self.night_id = resolve_night_id(self.client)

    @tag("contention")
    @task(5)
    def book_contended_seats(self):
        if self.night_id is None:
            return
        chosen = random.sample(CONTENDED_SEATS, k=random.randint(1, 3))
        with self.client.post("/api/v1/bookings/",
            json={
                "night_id": self.night_id,
                "customer_name": "Load Test",
                "customer_phone": "000",
                "seats": [{"seat_id": s, "table_id": CONTENDED_TABLE} for s in chosen],
            },
            catch_response=True
        ) as resp:
            if resp.status_code == 201:
                resp.success()
            elif resp.status_code == 409:
                resp.success()  # Expected: seat already taken
            else:
                resp.failure(f"Unexpected: {resp.status_code}")

    @tag("contention")
    @task(1)
    def release_random_booking(self):
        """Free seats again so the contention keeps going."""
        if self.night_id is None:
            return
        resp = self.client.get(f"/api/v1/bookings/?night_id={self.night_id}",
            name="/api/v1/bookings/?night_id")
        if resp.status_code != 200 or not resp.json():
            return
        booking_id = random.choice(resp.json())["id"]
        with self.client.delete(f"/api/v1/bookings/{booking_id}",
            name="/api/v1/bookings/{id}",
            catch_response=True
        ) as delete_resp:
            # 404: another user deleted it first
            if delete_resp.status_code in (200, 404):
                delete_resp.success()
            else:
                delete_resp.failure(f"Unexpected: {delete_resp.status_code}")


class ThroughputUser(HttpUser):
    """
    TEST 2: Throughput - floor plan clients polling seat state

    Run: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s
    """
    wait_time = between(0.1, 0.5)

    def on_start(self):
        self.night_id = resolve_night_id(self.client)

    @tag("throughput", "read")
    @task(10)
    def poll_reserved_seats(self):
        if self.night_id is None:
            return
        self.client.get(f"/api/v1/reserved-seats/?night_id={self.night_id}",
            name="/api/v1/reserved-seats/")

    @tag("throughput", "read")
    @task(3)
    def list_nights_cached(self):
        self.client.get("/api/v1/nights/", name="/api/v1/nights/ [cached]")

    @tag("throughput")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def on_start(self):
        self.night_id = resolve_night_id(self.client) or 1

    def _expect(self, payload: dict, allowed: tuple, name: str):
        with self.client.post("/api/v1/bookings/", json=payload, name=name, catch_response=True) as resp:
            if resp.status_code in allowed:
                resp.success()
            else:
                resp.failure(f"Expected {allowed}, got {resp.status_code}")

    @tag("edge")
    @task
    def unknown_night(self):
        self._expect({
            "night_id": 999999,
            "customer_name": "X",
            "customer_phone": "0",
            "seats": [{"seat_id": "1", "table_id": "T1"}],
        }, (404,), "bookings [unknown night]")

    @tag("edge")
    @task
    def duplicate_seats(self):
        self._expect({
            "night_id": self.night_id,
            "customer_name": "X",
            "customer_phone": "0",
            "seats": [{"seat_id": "500", "table_id": "T40"}] * 2,
        }, (400,), "bookings [duplicate seat]")

    @tag("edge")
    @task
    def empty_seats(self):
        self._expect({
            "night_id": self.night_id,
            "customer_name": "X",
            "customer_phone": "0",
            "seats": [],
        }, (400,), "bookings [no seats]")
