"""Forward cargo misdirection and arrival to the notification sink."""

import structlog
from protean.utils.mixins import handle

from shipping.cargo.cargo import Cargo
from shipping.cargo.events import CargoArrived, CargoMisdirected
from shipping.cargo.lookups import load_cargo
from shipping.domain import shipping
from shipping.notification import get_notifier

logger = structlog.get_logger(__name__)


@shipping.event_handler(part_of=Cargo)
class CargoNotificationEventHandler:
    @handle(CargoMisdirected)
    def on_cargo_misdirected(self, event: CargoMisdirected) -> None:
        cargo = load_cargo(str(event.tracking_id))
        get_notifier().cargo_was_misdirected(cargo)
        logger.info("Misdirection notification sent", tracking_id=cargo.tracking_id)

    @handle(CargoArrived)
    def on_cargo_arrived(self, event: CargoArrived) -> None:
        cargo = load_cargo(str(event.tracking_id))
        get_notifier().cargo_has_arrived(cargo)
        logger.info("Arrival notification sent", tracking_id=cargo.tracking_id)
