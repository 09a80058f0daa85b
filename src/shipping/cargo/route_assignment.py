"""Routing and rerouting: commands, handlers and the route query.

Rerouting is two steps. ``ChangeDestination`` or ``SpecifyNewRoute`` replace
the route specification and leave the itinerary alone, which makes the cargo
Misrouted; the operator then asks for candidate routes and assigns one with
``AssignCargoToRoute``. Each handler re-derives the delivery from the full
handling history before storing the cargo.
"""

import json

import structlog
from protean import handle
from protean.fields import DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo
from shipping.cargo.itinerary import Itinerary
from shipping.cargo.lookups import ensure_location_exists, load_cargo
from shipping.cargo.route_specification import RouteSpecification
from shipping.domain import shipping
from shipping.errors import InvalidArgumentError, UnknownCargoError
from shipping.handling.handling_event import HandlingEvent
from shipping.routing import get_router
from shipping.utils.timestamps import as_utc

logger = structlog.get_logger(__name__)


@shipping.command(part_of="Cargo")
class AssignCargoToRoute:
    """Commit the cargo to an itinerary, typically one returned by the route query."""

    tracking_id = Identifier(required=True)
    legs = Text(required=True)  # JSON list of leg dicts


@shipping.command(part_of="Cargo")
class ChangeDestination:
    """Send the cargo somewhere else, keeping its origin and deadline."""

    tracking_id = Identifier(required=True)
    destination = String(required=True, max_length=5)


@shipping.command(part_of="Cargo")
class SpecifyNewRoute:
    """Replace the whole route specification, e.g. to reroute from where a misdirected cargo is."""

    tracking_id = Identifier(required=True)
    origin = String(required=True, max_length=5)
    destination = String(required=True, max_length=5)
    arrival_deadline = DateTime()


def _store_with_fresh_delivery(cargo: Cargo) -> None:
    history = current_domain.repository_for(HandlingEvent).query_handling_history(cargo.tracking_id)
    cargo.derive_delivery_progress(history)
    current_domain.repository_for(Cargo).add(cargo)


@shipping.command_handler(part_of=Cargo)
class RouteAssignmentHandler:
    @handle(AssignCargoToRoute)
    def assign_cargo_to_route(self, command):
        legs_data = json.loads(command.legs) if isinstance(command.legs, str) else command.legs
        if not legs_data:
            raise InvalidArgumentError({"legs": ["An itinerary needs at least one leg"]})

        cargo = load_cargo(command.tracking_id)
        itinerary = Itinerary.from_dicts(legs_data)
        cargo.assign_to_route(itinerary)
        _store_with_fresh_delivery(cargo)

        logger.info(
            "Cargo assigned to route",
            tracking_id=command.tracking_id,
            legs=len(itinerary),
            routing_status=cargo.delivery.routing_status,
        )

    @handle(ChangeDestination)
    def change_destination(self, command):
        ensure_location_exists(command.destination, "destination")
        cargo = load_cargo(command.tracking_id)
        cargo.specify_new_route(cargo.route_specification.with_destination(command.destination))
        _store_with_fresh_delivery(cargo)

        logger.info(
            "Cargo destination changed",
            tracking_id=command.tracking_id,
            destination=command.destination,
            routing_status=cargo.delivery.routing_status,
        )

    @handle(SpecifyNewRoute)
    def specify_new_route(self, command):
        ensure_location_exists(command.origin, "origin")
        ensure_location_exists(command.destination, "destination")
        cargo = load_cargo(command.tracking_id)
        cargo.specify_new_route(
            RouteSpecification(
                origin=command.origin,
                destination=command.destination,
                arrival_deadline=as_utc(command.arrival_deadline),
            )
        )
        _store_with_fresh_delivery(cargo)

        logger.info(
            "Cargo route specification replaced",
            tracking_id=command.tracking_id,
            origin=command.origin,
            destination=command.destination,
            routing_status=cargo.delivery.routing_status,
        )


def request_possible_routes(tracking_id: str) -> list[Itinerary]:
    """Candidate itineraries for the cargo's current route specification.

    An unknown tracking id yields no candidates.
    """
    try:
        cargo = load_cargo(tracking_id)
    except UnknownCargoError:
        logger.warning("Route requested for unknown cargo", tracking_id=tracking_id)
        return []
    return get_router().fetch_routes_for_specification(cargo.route_specification)
