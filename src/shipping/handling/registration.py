"""Handling event registration: command and handler.

The handler performs the argument checks, then hands the identifiers to the
factory, which checks that cargo, voyage and location exist. The new event is
appended to the history; the cargo's delivery is re-derived by the inspection
handler reacting to ``HandlingEventRegistered``.
"""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from shipping.domain import shipping
from shipping.errors import InvalidArgumentError
from shipping.handling.activity import HandlingEventType
from shipping.handling.factory import HandlingEventFactory
from shipping.handling.handling_event import HandlingEvent
from shipping.utils.timestamps import as_utc

logger = structlog.get_logger(__name__)


@shipping.command(part_of="HandlingEvent")
class RegisterHandlingEvent:
    """Record that a cargo was handled at a location, optionally on a voyage.

    Fields are optional at the command level so that missing values surface
    as ``InvalidArgumentError`` from the handler.
    """

    completed_at = DateTime()
    tracking_id = Identifier()
    voyage_number = String(max_length=20)
    location = String(max_length=5)
    event_type = String(max_length=20)


def _check_arguments(command) -> HandlingEventType:
    errors = {}
    if not command.completed_at:
        errors["completed_at"] = ["Completion time is required"]
    if not command.tracking_id:
        errors["tracking_id"] = ["Tracking id is required"]
    if not command.location:
        errors["location"] = ["Location is required"]

    event_type = None
    try:
        event_type = HandlingEventType(command.event_type)
    except ValueError:
        errors["event_type"] = [f"Unknown event type {command.event_type!r}"]
    else:
        if event_type == HandlingEventType.NOT_HANDLED:
            errors["event_type"] = ["Event type must not be Not_Handled"]

    if errors:
        raise InvalidArgumentError(errors)
    return event_type


@shipping.command_handler(part_of=HandlingEvent)
class HandlingEventRegistrationHandler:
    @handle(RegisterHandlingEvent)
    def register_handling_event(self, command):
        event_type = _check_arguments(command)

        handling_event = HandlingEventFactory.from_domain().create_handling_event(
            registered_at=datetime.now(UTC),
            completed_at=as_utc(command.completed_at),
            tracking_id=command.tracking_id,
            voyage_number=command.voyage_number,
            unlocode=command.location,
            event_type=event_type.value,
        )
        current_domain.repository_for(HandlingEvent).add(handling_event)

        logger.info(
            "Handling event registered",
            tracking_id=command.tracking_id,
            event_type=event_type.value,
            location=command.location,
            voyage_number=command.voyage_number,
        )
        return str(handling_event.id)
