"""Logging cargo notifier: writes each notification to the structured log."""

import structlog

from shipping.notification.port import CargoEventsPort

logger = structlog.get_logger(__name__)


class LoggingNotifier(CargoEventsPort):
    def cargo_was_misdirected(self, cargo) -> None:
        logger.warning(
            "Cargo misdirected",
            tracking_id=cargo.tracking_id,
            last_known_location=cargo.delivery.last_known_location if cargo.delivery else None,
        )

    def cargo_has_arrived(self, cargo) -> None:
        logger.info(
            "Cargo arrived at destination",
            tracking_id=cargo.tracking_id,
            destination=cargo.route_specification.destination,
        )
