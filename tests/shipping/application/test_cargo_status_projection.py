"""The cargo status projection follows booking, rerouting and handling."""

from datetime import UTC, datetime

from protean import current_domain
from shipping.cargo.booking import BookNewCargo
from shipping.cargo.route_assignment import AssignCargoToRoute, ChangeDestination, request_possible_routes
from shipping.handling.registration import RegisterHandlingEvent
from shipping.projections.cargo_status import CargoStatusView, cargo_status_views


def _on(day: int) -> datetime:
    return datetime(2009, 3, day, 12, tzinfo=UTC)


def _book():
    return current_domain.process(
        BookNewCargo(origin="CNHKG", destination="SESTO", arrival_deadline=_on(18)),
        asynchronous=False,
    )


def _view(tracking_id):
    return current_domain.repository_for(CargoStatusView).get(tracking_id)


def test_booking_creates_row():
    tracking_id = _book()
    view = _view(tracking_id)
    assert view.origin == "CNHKG"
    assert view.destination == "SESTO"
    assert view.arrival_deadline == _on(18)
    assert view.transport_status == "Not_Received"
    assert view.routing_status == "Not_Routed"
    assert view.is_misdirected is False


def test_destination_change_is_reflected():
    tracking_id = _book()
    current_domain.process(ChangeDestination(tracking_id=tracking_id, destination="DEHAM"), asynchronous=False)
    assert _view(tracking_id).destination == "DEHAM"


def test_handling_updates_delivery_columns():
    tracking_id = _book()
    itinerary = request_possible_routes(tracking_id)[0]
    current_domain.process(AssignCargoToRoute(tracking_id=tracking_id, legs=itinerary.to_json()), asynchronous=False)
    assert _view(tracking_id).routing_status == "Routed"
    assert _view(tracking_id).next_expected_event_type == "Receive"

    current_domain.process(
        RegisterHandlingEvent(
            completed_at=_on(3),
            tracking_id=tracking_id,
            voyage_number="V100",
            location="CNHKG",
            event_type="Load",
        ),
        asynchronous=False,
    )
    view = _view(tracking_id)
    assert view.transport_status == "Onboard_Carrier"
    assert view.current_voyage == "V100"
    assert view.next_expected_event_type == "Unload"
    assert view.next_expected_location == "USNYC"
    assert view.eta == _on(11)


def test_filter_by_misdirection():
    on_plan = _book()
    misdirected = _book()
    for tracking_id in (on_plan, misdirected):
        itinerary = request_possible_routes(tracking_id)[0]
        current_domain.process(
            AssignCargoToRoute(tracking_id=tracking_id, legs=itinerary.to_json()),
            asynchronous=False,
        )
    current_domain.process(
        RegisterHandlingEvent(
            completed_at=_on(5),
            tracking_id=misdirected,
            voyage_number="V100",
            location="JNTKO",
            event_type="Unload",
        ),
        asynchronous=False,
    )

    assert {v.tracking_id for v in cargo_status_views()} == {on_plan, misdirected}
    assert [v.tracking_id for v in cargo_status_views(misdirected=True)] == [misdirected]
    assert [v.tracking_id for v in cargo_status_views(misdirected=False)] == [on_plan]


def test_listing_is_not_truncated():
    booked = {_book() for _ in range(120)}
    views = cargo_status_views(misdirected=False)
    assert {v.tracking_id for v in views} == booked
