"""Cargo domain events.

Legs travel as a JSON list of leg dicts, the same shape the routing
endpoints accept and return.
"""

from protean.fields import Boolean, DateTime, Identifier, String, Text

from shipping.domain import shipping


@shipping.event(part_of="Cargo")
class CargoBooked:
    """A new cargo was booked."""

    __version__ = 1

    tracking_id = Identifier(required=True)
    origin = String(required=True)
    destination = String(required=True)
    arrival_deadline = DateTime()
    booked_at = DateTime(required=True)


@shipping.event(part_of="Cargo")
class CargoAssignedToRoute:
    """The cargo was committed to a new itinerary."""

    __version__ = 1

    tracking_id = Identifier(required=True)
    legs = Text(required=True)  # JSON list of leg dicts
    final_arrival_location = String()
    final_arrival_date = DateTime()
    assigned_at = DateTime(required=True)


@shipping.event(part_of="Cargo")
class RouteSpecificationChanged:
    """The cargo's origin, destination or deadline changed."""

    __version__ = 1

    tracking_id = Identifier(required=True)
    origin = String(required=True)
    destination = String(required=True)
    arrival_deadline = DateTime()
    changed_at = DateTime(required=True)


@shipping.event(part_of="Cargo")
class DeliveryProgressDerived:
    """A fresh delivery snapshot was derived for the cargo."""

    __version__ = 1

    tracking_id = Identifier(required=True)
    transport_status = String(required=True)
    routing_status = String(required=True)
    last_known_location = String()
    current_voyage = String()
    is_misdirected = Boolean(default=False)
    is_unloaded_at_destination = Boolean(default=False)
    eta = DateTime()
    next_expected_event_type = String()
    next_expected_location = String()
    next_expected_voyage = String()
    calculated_at = DateTime(required=True)


@shipping.event(part_of="Cargo")
class CargoMisdirected:
    """The cargo was handled somewhere its itinerary does not account for."""

    __version__ = 1

    tracking_id = Identifier(required=True)
    last_known_location = String()
    detected_at = DateTime(required=True)


@shipping.event(part_of="Cargo")
class CargoArrived:
    """The cargo was unloaded at its final destination."""

    __version__ = 1

    tracking_id = Identifier(required=True)
    destination = String(required=True)
    arrived_at = DateTime(required=True)
