"""Handling event types and the HandlingActivity value object.

A handling activity is what happens to a cargo at a location, optionally on
a voyage. It describes both observed events and the next step an itinerary
predicts. The "not handled" activity with no location means nothing is
known or expected.
"""

from enum import Enum

from protean.fields import String

from shipping.domain import shipping


class HandlingEventType(Enum):
    NOT_HANDLED = "Not_Handled"
    RECEIVE = "Receive"
    LOAD = "Load"
    UNLOAD = "Unload"
    CUSTOMS = "Customs"
    CLAIM = "Claim"

    @property
    def requires_voyage(self) -> bool:
        return self in _VOYAGE_TYPES


_VOYAGE_TYPES = {HandlingEventType.LOAD, HandlingEventType.UNLOAD}


@shipping.value_object
class HandlingActivity:
    event_type = String(
        max_length=20,
        choices=HandlingEventType,
        default=HandlingEventType.NOT_HANDLED.value,
    )
    location = String(max_length=5)
    voyage_number = String(max_length=20)

    @property
    def is_empty(self) -> bool:
        return self.event_type == HandlingEventType.NOT_HANDLED.value and not self.location


def no_activity() -> HandlingActivity:
    return HandlingActivity(event_type=HandlingEventType.NOT_HANDLED.value)
