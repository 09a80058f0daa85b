"""BDD tests for handling registration and delivery derivation."""

from datetime import UTC, datetime

from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from shipping.cargo.cargo import Cargo
from shipping.errors import UnknownVoyageError
from shipping.handling.registration import RegisterHandlingEvent

scenarios("features/cargo_handling.feature")


def _register(tracking_id, event_type, location, day, voyage_number=None):
    current_domain.process(
        RegisterHandlingEvent(
            completed_at=datetime(2009, 3, day, 12, tzinfo=UTC),
            tracking_id=tracking_id,
            voyage_number=voyage_number,
            location=location,
            event_type=event_type,
        ),
        asynchronous=False,
    )


def _delivery(tracking_id):
    return current_domain.repository_for(Cargo).get(tracking_id).delivery


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the cargo is handled with "{event_type:w}" in "{location:w}" on March {day:d}'))
def handle_without_voyage(tracking_id, event_type, location, day):
    _register(tracking_id, event_type, location, day)


@when(
    parsers.cfparse(
        'the cargo is handled with "{event_type:w}" in "{location:w}" on voyage "{voyage_number:w}" on March {day:d}'
    )
)
def handle_on_voyage(tracking_id, event_type, location, voyage_number, day, error):
    try:
        _register(tracking_id, event_type, location, day, voyage_number)
    except UnknownVoyageError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the last known location is "{location:w}"'))
def last_known_location(tracking_id, location):
    assert _delivery(tracking_id).last_known_location == location


@then(parsers.cfparse('the current voyage is "{voyage_number:w}"'))
def current_voyage(tracking_id, voyage_number):
    assert _delivery(tracking_id).current_voyage == voyage_number


@then("the cargo is unloaded at its destination")
def unloaded_at_destination(tracking_id):
    assert _delivery(tracking_id).is_unloaded_at_destination is True


@then("the registration fails with an unknown voyage")
def registration_failed(error):
    assert isinstance(error["exc"], UnknownVoyageError)
