"""Cargo booking: command and handler."""

import structlog
from protean import handle
from protean.fields import DateTime, String
from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo, next_tracking_id
from shipping.cargo.lookups import ensure_location_exists
from shipping.cargo.route_specification import RouteSpecification
from shipping.domain import shipping
from shipping.errors import InvalidArgumentError
from shipping.utils.timestamps import as_utc

logger = structlog.get_logger(__name__)


@shipping.command(part_of="Cargo")
class BookNewCargo:
    """Book a cargo from origin to destination, to arrive by the deadline."""

    origin = String(max_length=5)
    destination = String(max_length=5)
    arrival_deadline = DateTime()


@shipping.command_handler(part_of=Cargo)
class BookingHandler:
    @handle(BookNewCargo)
    def book_new_cargo(self, command):
        errors = {}
        for field in ("origin", "destination", "arrival_deadline"):
            if not getattr(command, field):
                errors[field] = [f"{field.replace('_', ' ').capitalize()} is required"]
        if errors:
            raise InvalidArgumentError(errors)

        ensure_location_exists(command.origin, "origin")
        ensure_location_exists(command.destination, "destination")

        tracking_id = next_tracking_id()
        cargo = Cargo.book(
            tracking_id,
            RouteSpecification(
                origin=command.origin,
                destination=command.destination,
                arrival_deadline=as_utc(command.arrival_deadline),
            ),
        )
        current_domain.repository_for(Cargo).add(cargo)

        logger.info(
            "Cargo booked",
            tracking_id=tracking_id,
            origin=command.origin,
            destination=command.destination,
        )
        return tracking_id
