"""Cargo inspection: re-derive delivery whenever a handling event is registered."""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from shipping.cargo.cargo import Cargo
from shipping.cargo.locking import cargo_lock
from shipping.cargo.lookups import load_cargo
from shipping.domain import shipping
from shipping.errors import UnknownCargoError
from shipping.handling.events import HandlingEventRegistered
from shipping.handling.handling_event import HandlingEvent

logger = structlog.get_logger(__name__)


def inspect_cargo(tracking_id: str) -> Cargo | None:
    """Re-derive and store the cargo's delivery from its full handling history.

    Returns the updated cargo, or None when no cargo has this tracking id.
    """
    with cargo_lock(tracking_id):
        try:
            cargo = load_cargo(tracking_id)
        except UnknownCargoError:
            logger.warning("Cannot inspect unknown cargo", tracking_id=tracking_id)
            return None

        history = current_domain.repository_for(HandlingEvent).query_handling_history(tracking_id)
        delivery = cargo.derive_delivery_progress(history)
        current_domain.repository_for(Cargo).add(cargo)

    logger.info(
        "Cargo inspected",
        tracking_id=tracking_id,
        transport_status=delivery.transport_status,
        is_misdirected=delivery.is_misdirected,
        is_unloaded_at_destination=delivery.is_unloaded_at_destination,
    )
    return cargo


@shipping.event_handler(part_of=Cargo, stream_category="shipping::handling_event")
class CargoInspectionEventHandler:
    """Keeps each cargo's delivery in step with its handling history."""

    @handle(HandlingEventRegistered)
    def on_handling_event_registered(self, event: HandlingEventRegistered) -> None:
        inspect_cargo(str(event.tracking_id))
