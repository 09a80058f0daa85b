"""HandlingHistory: the ordered log of handling events for one cargo."""


class HandlingHistory:
    """An immutable sequence of handling events in registration order.

    Derivation looks at events by completion time. Sorting is stable, so two
    events completed at the same instant keep their registration order and
    the later-registered one counts as more recent.
    """

    def __init__(self, events=()):
        self._events = tuple(events)

    @classmethod
    def empty(cls) -> "HandlingHistory":
        return cls()

    @property
    def events(self) -> tuple:
        return self._events

    def is_empty(self) -> bool:
        return not self._events

    def in_completion_order(self) -> list:
        return sorted(self._events, key=lambda e: e.completed_at)

    def most_recently_completed_event(self):
        """The last event by completion time, or None for an empty history."""
        if not self._events:
            return None
        return self.in_completion_order()[-1]

    def appended(self, event) -> "HandlingHistory":
        return HandlingHistory((*self._events, event))

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    def __repr__(self) -> str:
        return f"HandlingHistory({len(self._events)} events)"
