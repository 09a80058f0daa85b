"""Delivery derivation.

A ``Delivery`` is a snapshot of where a cargo is and what should happen to it
next. It is never edited in place: ``derive_delivery`` rebuilds it from the
route specification, the current itinerary and the handling history, and the
cargo replaces its previous snapshot with the result.

Derivation is total. Empty histories, empty itineraries and events that fall
outside the plan all produce a snapshot; unknowns are expressed as ``None``
and the empty handling activity rather than as errors.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, String, ValueObject

from shipping.domain import shipping
from shipping.handling.activity import HandlingActivity, HandlingEventType, no_activity


class TransportStatus(Enum):
    NOT_RECEIVED = "Not_Received"
    IN_PORT = "In_Port"
    ONBOARD_CARRIER = "Onboard_Carrier"
    CLAIMED = "Claimed"
    UNKNOWN = "Unknown"


class RoutingStatus(Enum):
    NOT_ROUTED = "Not_Routed"
    ROUTED = "Routed"
    MISROUTED = "Misrouted"


_TRANSPORT_STATUS_BY_EVENT = {
    HandlingEventType.RECEIVE: TransportStatus.IN_PORT,
    HandlingEventType.LOAD: TransportStatus.ONBOARD_CARRIER,
    HandlingEventType.UNLOAD: TransportStatus.IN_PORT,
    HandlingEventType.CUSTOMS: TransportStatus.IN_PORT,
    HandlingEventType.CLAIM: TransportStatus.CLAIMED,
}


@shipping.value_object(part_of="Cargo")
class Delivery:
    last_known_location = String(max_length=5)
    current_voyage = String(max_length=20)
    transport_status = String(
        max_length=20,
        choices=TransportStatus,
        default=TransportStatus.NOT_RECEIVED.value,
    )
    eta = DateTime()
    next_expected_activity = ValueObject(HandlingActivity)
    is_misdirected = Boolean(default=False)
    is_unloaded_at_destination = Boolean(default=False)
    routing_status = String(
        max_length=20,
        choices=RoutingStatus,
        default=RoutingStatus.NOT_ROUTED.value,
    )
    calculated_at = DateTime()

    @property
    def is_on_track(self) -> bool:
        return self.routing_status == RoutingStatus.ROUTED.value and not self.is_misdirected


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------
def routing_status_of(route_specification, itinerary) -> RoutingStatus:
    """Routing status depends on the itinerary and the specification only."""
    if itinerary.is_empty():
        return RoutingStatus.NOT_ROUTED
    if itinerary.satisfies(route_specification):
        return RoutingStatus.ROUTED
    return RoutingStatus.MISROUTED


def _transport_status(last_event) -> TransportStatus:
    if last_event is None:
        return TransportStatus.NOT_RECEIVED
    return _TRANSPORT_STATUS_BY_EVENT.get(HandlingEventType(last_event.event_type), TransportStatus.UNKNOWN)


def _next_expected_activity(route_specification, itinerary, last_event) -> HandlingActivity:
    """Walk the itinerary from the last event to the step the plan predicts next.

    Only called for cargo that is on track, so Load and Unload events
    always have a matching leg.
    """
    if last_event is None:
        return HandlingActivity(
            event_type=HandlingEventType.RECEIVE.value,
            location=route_specification.origin,
        )

    event_type = HandlingEventType(last_event.event_type)

    if event_type == HandlingEventType.RECEIVE:
        first = itinerary.first_leg
        return HandlingActivity(
            event_type=HandlingEventType.LOAD.value,
            location=first.load_location,
            voyage_number=first.voyage_number,
        )

    if event_type == HandlingEventType.LOAD:
        for leg in itinerary.legs_matching_load(last_event.voyage_number, last_event.location):
            return HandlingActivity(
                event_type=HandlingEventType.UNLOAD.value,
                location=leg.unload_location,
                voyage_number=leg.voyage_number,
            )
        return no_activity()

    if event_type == HandlingEventType.UNLOAD:
        for leg in itinerary.legs_matching_unload(last_event.voyage_number, last_event.location):
            following = itinerary.next_leg_after(leg)
            if following is not None:
                return HandlingActivity(
                    event_type=HandlingEventType.LOAD.value,
                    location=following.load_location,
                    voyage_number=following.voyage_number,
                )
            return HandlingActivity(
                event_type=HandlingEventType.CLAIM.value,
                location=leg.unload_location,
            )
        return no_activity()

    # Customs and Claim end the plan
    return no_activity()


def derive_delivery(route_specification, itinerary, history, calculated_at: datetime | None = None) -> Delivery:
    """Derive a fresh Delivery snapshot.

    Depends only on its arguments. ``calculated_at`` defaults to the current
    time; pass it explicitly for reproducible snapshots.
    """
    last_event = history.most_recently_completed_event()

    routing_status = routing_status_of(route_specification, itinerary)
    misdirected = last_event is not None and not itinerary.is_expected(last_event)
    on_track = routing_status == RoutingStatus.ROUTED and not misdirected

    last_known_location = last_event.location if last_event is not None else None
    current_voyage = None
    if last_event is not None and last_event.event_type == HandlingEventType.LOAD.value:
        current_voyage = last_event.voyage_number or None

    unloaded_at_destination = (
        last_event is not None
        and last_event.event_type == HandlingEventType.UNLOAD.value
        and last_event.location == route_specification.destination
    )

    if on_track:
        eta = itinerary.final_arrival_date
        next_activity = _next_expected_activity(route_specification, itinerary, last_event)
    else:
        eta = None
        next_activity = no_activity()

    return Delivery(
        last_known_location=last_known_location,
        current_voyage=current_voyage,
        transport_status=_transport_status(last_event).value,
        eta=eta,
        next_expected_activity=next_activity,
        is_misdirected=misdirected,
        is_unloaded_at_destination=unloaded_at_destination,
        routing_status=routing_status.value,
        calculated_at=calculated_at or datetime.now(UTC),
    )
