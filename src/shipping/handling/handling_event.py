"""HandlingEvent aggregate: an observed touch of a cargo.

Handling events are append-only. ``completed_at`` is when the handling
happened in the world; ``registered_at`` is when the system learned about it.
Events may be reported late, so history is ordered by completion time.
"""

from datetime import datetime

from protean.fields import DateTime, Identifier, String

from shipping.domain import shipping
from shipping.handling.activity import HandlingActivity, HandlingEventType
from shipping.handling.events import HandlingEventRegistered
from shipping.handling.history import HandlingHistory
from shipping.utils.queries import fetch_all


@shipping.aggregate
class HandlingEvent:
    tracking_id = Identifier(required=True)
    event_type = String(required=True, max_length=20, choices=HandlingEventType)
    location = String(required=True, max_length=5)
    voyage_number = String(max_length=20)
    completed_at = DateTime(required=True)
    registered_at = DateTime(required=True)

    @classmethod
    def register(
        cls,
        tracking_id: str,
        event_type: str,
        location: str,
        completed_at: datetime,
        registered_at: datetime,
        voyage_number: str | None = None,
    ):
        event = cls(
            tracking_id=tracking_id,
            event_type=event_type,
            location=location,
            voyage_number=voyage_number or None,
            completed_at=completed_at,
            registered_at=registered_at,
        )
        event.raise_(
            HandlingEventRegistered(
                handling_event_id=str(event.id),
                tracking_id=tracking_id,
                event_type=event_type,
                location=location,
                voyage_number=voyage_number or None,
                completed_at=completed_at,
                registered_at=registered_at,
            )
        )
        return event

    @property
    def activity(self) -> HandlingActivity:
        return HandlingActivity(
            event_type=self.event_type,
            location=self.location,
            voyage_number=self.voyage_number,
        )


@shipping.repository(part_of=HandlingEvent)
class HandlingEventRepository:
    def query_handling_history(self, tracking_id: str) -> HandlingHistory:
        """Return every event recorded for the cargo, in registration order."""
        events = fetch_all(self._dao.query.filter(tracking_id=tracking_id), "id")
        return HandlingHistory(sorted(events, key=lambda e: e.registered_at))
