"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names of the API's pydantic request schemas and
only use the sample locations and voyages stored by ``manage.py seed``.
"""

import random
from datetime import UTC, datetime, timedelta

from faker import Faker

fake = Faker()

# Origins the fake router knows a route from, with their destination
ROUTABLE = [("CNHKG", "SESTO"), ("JNTKO", "SESTO")]

LOCATIONS = ["SESTO", "AUMEL", "CNHKG", "USNYC", "USCHI", "JNTKO", "DEHAM", "NLRTM", "FIHEL"]
VOYAGES = ["V100", "V200", "V300", "V400"]


def arrival_deadline() -> str:
    """A deadline late enough for every canned route (they arrive by 2009-03-15)."""
    deadline = fake.date_time_between(
        start_date=datetime(2009, 3, 16, tzinfo=UTC),
        end_date=datetime(2009, 4, 30, tzinfo=UTC),
        tzinfo=UTC,
    )
    return deadline.isoformat()


def booking_data() -> dict:
    """Generate a BookCargoRequest payload for a routable cargo."""
    origin, destination = random.choice(ROUTABLE)
    return {"origin": origin, "destination": destination, "arrival_deadline": arrival_deadline()}


def unroutable_booking_data() -> dict:
    """Generate a booking the fake router has no itinerary for."""
    origin, destination = random.sample(LOCATIONS, 2)
    return {"origin": origin, "destination": destination, "arrival_deadline": arrival_deadline()}


def handling_data(
    tracking_id: str,
    event_type: str,
    location: str,
    completed_at: str,
    voyage_number: str | None = None,
) -> dict:
    """Generate a RegisterHandlingEventRequest payload."""
    return {
        "completed_at": completed_at,
        "tracking_id": tracking_id,
        "voyage_number": voyage_number,
        "location": location,
        "event_type": event_type,
    }


def planned_handling(legs: list[dict]) -> list[tuple[str, str, str | None, str]]:
    """The handling events that carry a cargo along ``legs`` and claim it.

    Each entry is ``(event_type, location, voyage_number, completed_at)``.
    """
    first = legs[0]
    received_at = datetime.fromisoformat(first["load_time"]) - timedelta(days=1)
    steps = [("Receive", first["load_location"], None, received_at.isoformat())]
    for leg in legs:
        steps.append(("Load", leg["load_location"], leg["voyage_number"], leg["load_time"]))
        steps.append(("Unload", leg["unload_location"], leg["voyage_number"], leg["unload_time"]))
    last = legs[-1]
    claimed_at = datetime.fromisoformat(last["unload_time"]) + timedelta(days=1)
    steps.append(("Claim", last["unload_location"], None, claimed_at.isoformat()))
    return steps


def stray_handling() -> tuple[str, str, str]:
    """An unload somewhere along the sample voyages, usually off plan."""
    return "Unload", random.choice(LOCATIONS), random.choice(VOYAGES)
