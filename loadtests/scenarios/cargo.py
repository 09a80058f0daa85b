"""Cargo load test scenarios.

Stateful SequentialTaskSet journeys covering booking, routing, handling and
rerouting. Steps execute in order; each depends on the previous step
succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    arrival_deadline,
    booking_data,
    handling_data,
    planned_handling,
    stray_handling,
    unroutable_booking_data,
)
from loadtests.helpers.response import failure
from loadtests.helpers.state import CargoState


class _CargoJourney(SequentialTaskSet):
    def on_start(self):
        self.state = CargoState()

    def book(self, payload: dict) -> None:
        with self.client.post("/cargos", json=payload, catch_response=True, name="POST /cargos") as resp:
            if resp.status_code == 201:
                self.state.tracking_id = resp.json()["tracking_id"]
                self.state.origin = payload["origin"]
                self.state.destination = payload["destination"]
            else:
                resp.failure(failure("Booking", resp))
                self.interrupt()

    def route(self) -> None:
        with self.client.get(
            f"/cargos/{self.state.tracking_id}/routes",
            catch_response=True,
            name="GET /cargos/{id}/routes",
        ) as resp:
            candidates = resp.json() if resp.status_code == 200 else []
            if not candidates:
                resp.failure(f"No route for {self.state.origin} -> {self.state.destination}")
                self.interrupt()
                return
            self.state.legs = candidates[0]["legs"]

        with self.client.post(
            f"/cargos/{self.state.tracking_id}/route",
            json={"legs": self.state.legs},
            catch_response=True,
            name="POST /cargos/{id}/route",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(failure("Route assignment", resp))
                self.interrupt()

    def handle(self, event_type: str, location: str, voyage_number: str | None, completed_at: str) -> None:
        payload = handling_data(self.state.tracking_id, event_type, location, completed_at, voyage_number)
        with self.client.post(
            "/handling-events",
            json=payload,
            catch_response=True,
            name="POST /handling-events",
        ) as resp:
            if resp.status_code == 201:
                self.state.handled.append(event_type)
            else:
                resp.failure(failure(f"{event_type} registration", resp))

    def track(self) -> None:
        with self.client.get(
            f"/tracking/{self.state.tracking_id}",
            catch_response=True,
            name="GET /tracking/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(failure("Tracking", resp))


class CargoLifecycleJourney(_CargoJourney):
    """Book -> Route -> Receive, Load and Unload every leg -> Claim.

    Every handling step re-derives the cargo's delivery; the final unload
    announces arrival.
    """

    @task
    def book_cargo(self):
        self.book(booking_data())

    @task
    def assign_route(self):
        self.route()

    @task
    def handle_along_itinerary(self):
        for event_type, location, voyage_number, completed_at in planned_handling(self.state.legs):
            self.handle(event_type, location, voyage_number, completed_at)
            self.track()

    @task
    def done(self):
        self.interrupt()


class MisdirectionJourney(_CargoJourney):
    """Book from Hongkong -> Route -> Receive -> Unload off plan -> Reroute.

    Rerouting changes the destination, leaving the cargo misrouted.
    """

    @task
    def book_cargo(self):
        self.book({"origin": "CNHKG", "destination": "SESTO", "arrival_deadline": arrival_deadline()})

    @task
    def assign_route(self):
        self.route()

    @task
    def receive(self):
        self.handle("Receive", "CNHKG", None, "2009-03-02T12:00:00+00:00")

    @task
    def unload_off_plan(self):
        event_type, location, voyage_number = stray_handling()
        self.handle(event_type, location, voyage_number, "2009-03-05T12:00:00+00:00")
        self.track()

    @task
    def change_destination(self):
        with self.client.put(
            f"/cargos/{self.state.tracking_id}/destination",
            json={"destination": random.choice(["DEHAM", "FIHEL", "NLRTM"])},
            catch_response=True,
            name="PUT /cargos/{id}/destination",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(failure("Destination change", resp))

    @task
    def done(self):
        self.interrupt()


class UnroutableJourney(_CargoJourney):
    """Book between sample ports the router has no itinerary for -> ask for routes."""

    @task
    def book_cargo(self):
        self.book(unroutable_booking_data())

    @task
    def ask_for_routes(self):
        self.client.get(f"/cargos/{self.state.tracking_id}/routes", name="GET /cargos/{id}/routes")

    @task
    def view_cargo(self):
        self.client.get(f"/cargos/{self.state.tracking_id}", name="GET /cargos/{id}")

    @task
    def done(self):
        self.interrupt()


class BookingUser(HttpUser):
    """Books and ships cargos end to end."""

    wait_time = between(0.5, 2.0)
    tasks = {CargoLifecycleJourney: 6, MisdirectionJourney: 3, UnroutableJourney: 1}


class TrackingUser(HttpUser):
    """Read-only traffic against the booking and tracking views."""

    wait_time = between(0.2, 1.0)

    @task(3)
    def list_cargos(self):
        with self.client.get("/cargos", catch_response=True, name="GET /cargos") as resp:
            if resp.status_code != 200:
                resp.failure(failure("Cargo listing", resp))
                return
            cargos = resp.json()
        if cargos:
            tracking_id = random.choice(cargos)["tracking_id"]
            self.client.get(f"/tracking/{tracking_id}", name="GET /tracking/{id}")

    @task(1)
    def misdirected_cargos(self):
        self.client.get("/cargos/status", params={"misdirected": "true"}, name="GET /cargos/status")

    @task(1)
    def locations(self):
        self.client.get("/locations", name="GET /locations")
