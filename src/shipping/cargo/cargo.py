"""Cargo aggregate: the root binding a route specification, an itinerary and
the delivery snapshot derived from them.

The tracking id and booking origin never change. The route specification
changes on reroute and the itinerary on route assignment; neither change
touches the other. Whenever either changes, or the handling history grows,
the caller re-derives the delivery with ``derive_delivery_progress``.
"""

import json
import uuid
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, String, ValueObject

from shipping.cargo.delivery import Delivery, derive_delivery
from shipping.cargo.events import (
    CargoArrived,
    CargoAssignedToRoute,
    CargoBooked,
    CargoMisdirected,
    DeliveryProgressDerived,
    RouteSpecificationChanged,
)
from shipping.cargo.itinerary import Itinerary, Leg
from shipping.cargo.route_specification import RouteSpecification
from shipping.domain import shipping
from shipping.handling.history import HandlingHistory
from shipping.utils.queries import fetch_all


def next_tracking_id() -> str:
    """A new tracking id: the first eight hex digits of a random UUID, upper-cased."""
    return uuid.uuid4().hex[:8].upper()


@shipping.aggregate
class Cargo:
    tracking_id = Identifier(identifier=True, required=True)
    origin = String(required=True, max_length=5)
    route_specification = ValueObject(RouteSpecification, required=True)
    legs = HasMany(Leg)
    delivery = ValueObject(Delivery)
    booked_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def book(cls, tracking_id: str, route_specification: RouteSpecification):
        """Book a cargo with no itinerary and a delivery derived from an empty history."""
        now = datetime.now(UTC)
        cargo = cls(
            tracking_id=tracking_id,
            origin=route_specification.origin,
            route_specification=route_specification,
            booked_at=now,
            updated_at=now,
        )
        cargo.raise_(
            CargoBooked(
                tracking_id=tracking_id,
                origin=route_specification.origin,
                destination=route_specification.destination,
                arrival_deadline=route_specification.arrival_deadline,
                booked_at=now,
            )
        )
        cargo.derive_delivery_progress(HandlingHistory.empty(), calculated_at=now)
        return cargo

    @property
    def itinerary(self) -> Itinerary:
        return Itinerary(sorted(self.legs or [], key=lambda leg: leg.sequence))

    # -------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------
    def assign_to_route(self, itinerary: Itinerary) -> None:
        """Replace the itinerary.

        The new itinerary is not checked against the route specification;
        a mismatch shows up as a Misrouted routing status on the next
        derivation.
        """
        for leg in list(self.legs or []):
            self.remove_legs(leg)
        for position, leg in enumerate(itinerary.legs):
            self.add_legs(
                Leg(
                    voyage_number=leg.voyage_number,
                    load_location=leg.load_location,
                    unload_location=leg.unload_location,
                    load_time=leg.load_time,
                    unload_time=leg.unload_time,
                    sequence=position,
                )
            )

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            CargoAssignedToRoute(
                tracking_id=self.tracking_id,
                legs=json.dumps(itinerary.to_dicts()),
                final_arrival_location=itinerary.final_arrival_location,
                final_arrival_date=itinerary.final_arrival_date,
                assigned_at=now,
            )
        )

    def specify_new_route(self, route_specification: RouteSpecification) -> None:
        """Replace the route specification and leave the itinerary as it is."""
        if route_specification is None:
            raise ValidationError({"route_specification": ["A route specification is required"]})

        now = datetime.now(UTC)
        self.route_specification = route_specification
        self.updated_at = now
        self.raise_(
            RouteSpecificationChanged(
                tracking_id=self.tracking_id,
                origin=route_specification.origin,
                destination=route_specification.destination,
                arrival_deadline=route_specification.arrival_deadline,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Delivery
    # -------------------------------------------------------------------
    def derive_delivery_progress(self, history: HandlingHistory, calculated_at: datetime | None = None) -> Delivery:
        """Replace the delivery snapshot with one derived from ``history``.

        Raises ``CargoMisdirected`` and ``CargoArrived`` only when the
        respective flag was false in the previous snapshot.
        """
        previous = self.delivery
        delivery = derive_delivery(
            self.route_specification,
            self.itinerary,
            history,
            calculated_at=calculated_at,
        )
        self.delivery = delivery
        self.updated_at = delivery.calculated_at

        next_activity = delivery.next_expected_activity
        self.raise_(
            DeliveryProgressDerived(
                tracking_id=self.tracking_id,
                transport_status=delivery.transport_status,
                routing_status=delivery.routing_status,
                last_known_location=delivery.last_known_location,
                current_voyage=delivery.current_voyage,
                is_misdirected=delivery.is_misdirected,
                is_unloaded_at_destination=delivery.is_unloaded_at_destination,
                eta=delivery.eta,
                next_expected_event_type=next_activity.event_type if next_activity is not None else None,
                next_expected_location=next_activity.location if next_activity is not None else None,
                next_expected_voyage=next_activity.voyage_number if next_activity is not None else None,
                calculated_at=delivery.calculated_at,
            )
        )

        if delivery.is_misdirected and not (previous is not None and previous.is_misdirected):
            self.raise_(
                CargoMisdirected(
                    tracking_id=self.tracking_id,
                    last_known_location=delivery.last_known_location,
                    detected_at=delivery.calculated_at,
                )
            )
        if delivery.is_unloaded_at_destination and not (previous is not None and previous.is_unloaded_at_destination):
            self.raise_(
                CargoArrived(
                    tracking_id=self.tracking_id,
                    destination=self.route_specification.destination,
                    arrived_at=delivery.calculated_at,
                )
            )
        return delivery


@shipping.repository(part_of=Cargo)
class CargoRepository:
    def find_all(self) -> list[Cargo]:
        return fetch_all(self._dao.query, "tracking_id")
