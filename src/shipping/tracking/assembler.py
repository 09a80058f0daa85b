"""Tracking and booking read models, assembled at read time.

These are plain snapshots for views facing people: status and activity are
rendered as sentences, and each handling event is described and flagged as
expected or not against the cargo's current itinerary.
"""

from dataclasses import dataclass, field
from datetime import datetime

from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo
from shipping.cargo.delivery import RoutingStatus, TransportStatus
from shipping.cargo.lookups import load_cargo
from shipping.errors import InvalidArgumentError
from shipping.handling.activity import HandlingEventType
from shipping.handling.handling_event import HandlingEvent

NO_ACTIVITY_TEXT = "There are currently no expected activities for this cargo."


@dataclass(frozen=True)
class TrackedEvent:
    description: str
    expected: bool


@dataclass(frozen=True)
class TrackedCargo:
    tracking_id: str
    status_text: str
    origin: str
    destination: str
    eta: datetime | None
    next_expected_activity: str
    arrival_deadline: datetime | None
    events: tuple[TrackedEvent, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TrackedLeg:
    voyage_number: str
    load_location: str
    unload_location: str
    load_time: datetime | None
    unload_time: datetime | None


@dataclass(frozen=True)
class BookedCargo:
    tracking_id: str
    origin: str
    destination: str
    arrival_deadline: datetime | None
    legs: tuple[TrackedLeg, ...]
    misrouted: bool
    routed: bool


# ---------------------------------------------------------------------------
# Texts
# ---------------------------------------------------------------------------
def status_text(delivery) -> str:
    if delivery is None:
        return "Unknown"
    status = TransportStatus(delivery.transport_status)
    if status == TransportStatus.NOT_RECEIVED:
        return "Not received"
    if status == TransportStatus.IN_PORT:
        return f"In port {delivery.last_known_location}"
    if status == TransportStatus.ONBOARD_CARRIER:
        return f"Onboard voyage {delivery.current_voyage}"
    if status == TransportStatus.CLAIMED:
        return "Claimed"
    return "Unknown"


def next_expected_activity_text(activity) -> str:
    if activity is None:
        return NO_ACTIVITY_TEXT
    event_type = HandlingEventType(activity.event_type)
    prefix = "Next expected activity is to"
    if event_type == HandlingEventType.NOT_HANDLED:
        return NO_ACTIVITY_TEXT
    if event_type == HandlingEventType.LOAD:
        return f"{prefix} load cargo onto voyage {activity.voyage_number} in {activity.location}."
    if event_type == HandlingEventType.UNLOAD:
        return f"{prefix} unload cargo off of voyage {activity.voyage_number} in {activity.location}."
    return f"{prefix} {event_type.value.lower()} cargo in {activity.location}."


def describe_event(event) -> str:
    """One sentence per handling event, stamped with its completion time."""
    at = event.completed_at.isoformat() if event.completed_at else ""
    event_type = HandlingEventType(event.event_type)
    if event_type == HandlingEventType.RECEIVE:
        return f"Received in {event.location}, at {at}"
    if event_type == HandlingEventType.LOAD:
        return f"Loaded onto voyage {event.voyage_number} in {event.location}, at {at}."
    if event_type == HandlingEventType.UNLOAD:
        return f"Unloaded off voyage {event.voyage_number} in {event.location}, at {at}."
    if event_type == HandlingEventType.CLAIM:
        return f"Claimed in {event.location}, at {at}."
    if event_type == HandlingEventType.CUSTOMS:
        return f"Cleared customs in {event.location}, at {at}."
    return "Cargo has not yet been received."


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------
def assemble_tracked_cargo(cargo: Cargo, history) -> TrackedCargo:
    itinerary = cargo.itinerary
    delivery = cargo.delivery
    spec = cargo.route_specification
    return TrackedCargo(
        tracking_id=cargo.tracking_id,
        status_text=status_text(delivery),
        origin=cargo.origin,
        destination=spec.destination,
        eta=delivery.eta if delivery else None,
        next_expected_activity=next_expected_activity_text(delivery.next_expected_activity if delivery else None),
        arrival_deadline=spec.arrival_deadline,
        events=tuple(
            TrackedEvent(description=describe_event(event), expected=itinerary.is_expected(event))
            for event in history
        ),
    )


def assemble_booked_cargo(cargo: Cargo) -> BookedCargo:
    itinerary = cargo.itinerary
    delivery = cargo.delivery
    return BookedCargo(
        tracking_id=cargo.tracking_id,
        origin=cargo.origin,
        destination=cargo.route_specification.destination,
        arrival_deadline=cargo.route_specification.arrival_deadline,
        legs=tuple(
            TrackedLeg(
                voyage_number=leg.voyage_number,
                load_location=leg.load_location,
                unload_location=leg.unload_location,
                load_time=leg.load_time,
                unload_time=leg.unload_time,
            )
            for leg in itinerary
        ),
        misrouted=delivery is not None and delivery.routing_status == RoutingStatus.MISROUTED.value,
        routed=not itinerary.is_empty(),
    )


def track_cargo(tracking_id: str) -> TrackedCargo:
    if not tracking_id:
        raise InvalidArgumentError({"tracking_id": ["Tracking id is required"]})
    cargo = load_cargo(tracking_id)
    history = current_domain.repository_for(HandlingEvent).query_handling_history(tracking_id)
    return assemble_tracked_cargo(cargo, history)


def load_booked_cargo(tracking_id: str) -> BookedCargo:
    return assemble_booked_cargo(load_cargo(tracking_id))


def list_booked_cargos() -> list[BookedCargo]:
    cargos = current_domain.repository_for(Cargo).find_all()
    return [assemble_booked_cargo(cargo) for cargo in sorted(cargos, key=lambda c: c.booked_at)]
