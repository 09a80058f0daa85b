"""Stress test scenarios for per-cargo serialization and re-derivation.

HandlingFloodUser registers handling events for a handful of cargos as fast
as it can, so that concurrent requests keep contending for the same cargo
lock. BookingFloodUser hammers the booking endpoint with new cargos.
"""

import random
from datetime import UTC, datetime, timedelta

from locust import HttpUser, constant_pacing, task

from loadtests.data_generators import booking_data, handling_data, stray_handling
from loadtests.helpers.response import failure

_HOT_CARGOS = 5


class HandlingFloodUser(HttpUser):
    """Stress test: many handling events against few cargos.

    Every registration reloads the cargo's whole history and re-derives its
    delivery, so histories grow and each request gets slower.
    Monitor: response times of POST /handling-events should grow roughly
    linearly with history length, never fail with a conflict.
    """

    wait_time = constant_pacing(0.05)  # ~20 requests/sec per user

    def on_start(self):
        self.tracking_ids = []
        for _ in range(_HOT_CARGOS):
            resp = self.client.post("/cargos", json=booking_data(), name="[STRESS] POST /cargos")
            if resp.status_code == 201:
                self.tracking_ids.append(resp.json()["tracking_id"])
        self.clock = datetime(2009, 3, 1, tzinfo=UTC)

    @task(10)
    def register_handling(self):
        if not self.tracking_ids:
            return
        self.clock += timedelta(minutes=random.randint(1, 90))
        event_type, location, voyage_number = stray_handling()
        payload = handling_data(
            random.choice(self.tracking_ids),
            event_type,
            location,
            self.clock.isoformat(),
            voyage_number,
        )
        with self.client.post(
            "/handling-events",
            json=payload,
            catch_response=True,
            name="[STRESS] POST /handling-events",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(failure("Handling registration", resp))

    @task(1)
    def track(self):
        if self.tracking_ids:
            self.client.get(f"/tracking/{random.choice(self.tracking_ids)}", name="[STRESS] GET /tracking/{id}")


class BookingFloodUser(HttpUser):
    """Stress test: maximum booking throughput, one new cargo per request."""

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    @task
    def book(self):
        self.client.post("/cargos", json=booking_data(), name="[STRESS] POST /cargos")
