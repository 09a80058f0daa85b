"""Cargo status: one row per cargo with its latest derived delivery, for dashboards."""

from protean.core.projector import on
from protean.fields import Boolean, DateTime, Identifier, String
from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo
from shipping.cargo.delivery import RoutingStatus, TransportStatus
from shipping.cargo.events import CargoBooked, DeliveryProgressDerived, RouteSpecificationChanged
from shipping.domain import shipping
from shipping.utils.queries import fetch_all


@shipping.projection
class CargoStatusView:
    tracking_id = Identifier(identifier=True, required=True)
    origin = String(required=True)
    destination = String(required=True)
    arrival_deadline = DateTime()
    transport_status = String(default=TransportStatus.NOT_RECEIVED.value)
    routing_status = String(default=RoutingStatus.NOT_ROUTED.value)
    last_known_location = String()
    current_voyage = String()
    is_misdirected = Boolean(default=False)
    is_unloaded_at_destination = Boolean(default=False)
    eta = DateTime()
    next_expected_event_type = String()
    next_expected_location = String()
    next_expected_voyage = String()
    booked_at = DateTime()
    updated_at = DateTime()


@shipping.projector(projector_for=CargoStatusView, aggregates=[Cargo])
class CargoStatusProjector:
    @on(CargoBooked)
    def on_cargo_booked(self, event):
        current_domain.repository_for(CargoStatusView).add(
            CargoStatusView(
                tracking_id=event.tracking_id,
                origin=event.origin,
                destination=event.destination,
                arrival_deadline=event.arrival_deadline,
                booked_at=event.booked_at,
                updated_at=event.booked_at,
            )
        )

    @on(RouteSpecificationChanged)
    def on_route_specification_changed(self, event):
        repo = current_domain.repository_for(CargoStatusView)
        view = repo.get(event.tracking_id)
        view.destination = event.destination
        view.arrival_deadline = event.arrival_deadline
        view.updated_at = event.changed_at
        repo.add(view)

    @on(DeliveryProgressDerived)
    def on_delivery_progress_derived(self, event):
        repo = current_domain.repository_for(CargoStatusView)
        view = repo.get(event.tracking_id)
        view.transport_status = event.transport_status
        view.routing_status = event.routing_status
        view.last_known_location = event.last_known_location
        view.current_voyage = event.current_voyage
        view.is_misdirected = event.is_misdirected
        view.is_unloaded_at_destination = event.is_unloaded_at_destination
        view.eta = event.eta
        view.next_expected_event_type = event.next_expected_event_type
        view.next_expected_location = event.next_expected_location
        view.next_expected_voyage = event.next_expected_voyage
        view.updated_at = event.calculated_at
        repo.add(view)


def cargo_status_views(misdirected: bool | None = None) -> list[CargoStatusView]:
    """All status rows, optionally only misdirected or only on-plan cargo."""
    query = current_domain.repository_for(CargoStatusView)._dao.query
    if misdirected is not None:
        query = query.filter(is_misdirected=misdirected)
    return fetch_all(query, "tracking_id")
