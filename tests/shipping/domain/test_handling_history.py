"""Tests for HandlingHistory ordering."""

from datetime import UTC, datetime

from shipping.handling.activity import HandlingEventType
from shipping.handling.handling_event import HandlingEvent
from shipping.handling.history import HandlingHistory


def _event(event_type: HandlingEventType, location: str, completed_day: int, registered_day: int):
    return HandlingEvent(
        tracking_id="ABC123",
        event_type=event_type.value,
        location=location,
        completed_at=datetime(2009, 3, completed_day, tzinfo=UTC),
        registered_at=datetime(2009, 3, registered_day, tzinfo=UTC),
    )


class TestHandlingHistory:
    def test_empty_history(self):
        history = HandlingHistory.empty()
        assert history.is_empty()
        assert len(history) == 0
        assert history.most_recently_completed_event() is None

    def test_keeps_registration_order(self):
        first = _event(HandlingEventType.RECEIVE, "CNHKG", 1, 1)
        second = _event(HandlingEventType.CUSTOMS, "CNHKG", 2, 2)
        history = HandlingHistory([first, second])
        assert list(history) == [first, second]
        assert history.events == (first, second)

    def test_most_recent_is_by_completion_time(self):
        claimed = _event(HandlingEventType.CLAIM, "SESTO", 16, 16)
        late_report = _event(HandlingEventType.RECEIVE, "CNHKG", 1, 17)
        history = HandlingHistory([claimed, late_report])
        assert history.most_recently_completed_event() is claimed
        assert history.in_completion_order() == [late_report, claimed]

    def test_same_completion_time_prefers_later_registration(self):
        first = _event(HandlingEventType.UNLOAD, "USNYC", 9, 9)
        second = _event(HandlingEventType.CUSTOMS, "USNYC", 9, 10)
        assert HandlingHistory([first, second]).most_recently_completed_event() is second

    def test_appended_returns_new_history(self):
        first = _event(HandlingEventType.RECEIVE, "CNHKG", 1, 1)
        history = HandlingHistory([first])
        longer = history.appended(_event(HandlingEventType.CUSTOMS, "CNHKG", 2, 2))
        assert len(history) == 1
        assert len(longer) == 2
