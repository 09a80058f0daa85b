"""Shared BDD fixtures and step definitions for the Shipping domain."""

from datetime import UTC, datetime

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from shipping.cargo.booking import BookNewCargo
from shipping.cargo.cargo import Cargo
from shipping.cargo.route_assignment import AssignCargoToRoute, request_possible_routes
from shipping.notification import get_notifier

ARRIVAL_DEADLINE = datetime(2009, 3, 18, 12, tzinfo=UTC)


def march(day: int) -> datetime:
    return datetime(2009, 3, day, 12, tzinfo=UTC)


def stored_cargo(tracking_id):
    return current_domain.repository_for(Cargo).get(tracking_id)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a cargo booked from "{origin:w}" to "{destination:w}"'), target_fixture="tracking_id")
def booked_cargo(origin, destination):
    return current_domain.process(
        BookNewCargo(origin=origin, destination=destination, arrival_deadline=ARRIVAL_DEADLINE),
        asynchronous=False,
    )


@given("the cargo is assigned to its first candidate route")
@when("the cargo is assigned to its first candidate route")
def assign_first_candidate(tracking_id):
    itinerary = request_possible_routes(tracking_id)[0]
    current_domain.process(
        AssignCargoToRoute(tracking_id=tracking_id, legs=itinerary.to_json()),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cargo is "{transport_status:w}"'))
def cargo_transport_status(tracking_id, transport_status):
    assert stored_cargo(tracking_id).delivery.transport_status == transport_status


@then(parsers.cfparse('the routing status is "{routing_status:w}"'))
def cargo_routing_status(tracking_id, routing_status):
    assert stored_cargo(tracking_id).delivery.routing_status == routing_status


@then("no activity is expected")
def no_activity_expected(tracking_id):
    assert stored_cargo(tracking_id).delivery.next_expected_activity.is_empty


@then(parsers.cfparse('the next expected activity is "{event_type:w}" in "{location:w}" on voyage "{voyage_number:w}"'))
def next_activity_on_voyage(tracking_id, event_type, location, voyage_number):
    activity = stored_cargo(tracking_id).delivery.next_expected_activity
    assert (activity.event_type, activity.location, activity.voyage_number) == (event_type, location, voyage_number)


@then(parsers.cfparse('the next expected activity is "{event_type:w}" in "{location:w}"'))
def next_activity(tracking_id, event_type, location):
    activity = stored_cargo(tracking_id).delivery.next_expected_activity
    assert (activity.event_type, activity.location, activity.voyage_number) == (event_type, location, None)


@then("the cargo is misdirected")
def cargo_is_misdirected(tracking_id):
    assert stored_cargo(tracking_id).delivery.is_misdirected is True


@then("the cargo notifier was told the cargo is misdirected")
def notified_misdirected(tracking_id):
    assert get_notifier().misdirected == [tracking_id]


@then("the cargo notifier was told the cargo has arrived")
def notified_arrived(tracking_id):
    assert get_notifier().arrived == [tracking_id]
