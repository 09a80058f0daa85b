"""Application tests for booking and rerouting commands via domain.process()."""

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from shipping.cargo.booking import BookNewCargo
from shipping.cargo.cargo import Cargo
from shipping.cargo.delivery import RoutingStatus, TransportStatus
from shipping.cargo.route_assignment import (
    AssignCargoToRoute,
    ChangeDestination,
    SpecifyNewRoute,
    request_possible_routes,
)
from shipping.errors import InvalidArgumentError, UnknownCargoError, UnknownLocationError
from shipping.routing import get_router

DEADLINE = datetime(2009, 3, 18, 12, tzinfo=UTC)


def _book(origin="CNHKG", destination="SESTO", deadline=DEADLINE):
    return current_domain.process(
        BookNewCargo(origin=origin, destination=destination, arrival_deadline=deadline),
        asynchronous=False,
    )


def _assign_first_route(tracking_id):
    itinerary = request_possible_routes(tracking_id)[0]
    current_domain.process(
        AssignCargoToRoute(tracking_id=tracking_id, legs=itinerary.to_json()),
        asynchronous=False,
    )
    return itinerary


def _cargo(tracking_id):
    return current_domain.repository_for(Cargo).get(tracking_id)


class TestBookNewCargo:
    def test_returns_tracking_id_of_stored_cargo(self):
        tracking_id = _book()
        cargo = _cargo(tracking_id)
        assert cargo.origin == "CNHKG"
        assert cargo.route_specification.destination == "SESTO"
        assert cargo.route_specification.arrival_deadline == DEADLINE

    def test_tracking_id_is_eight_upper_hex_digits(self):
        tracking_id = _book()
        assert len(tracking_id) == 8
        assert tracking_id == tracking_id.upper()
        int(tracking_id, 16)

    def test_booked_cargo_has_initial_delivery(self):
        cargo = _cargo(_book())
        assert cargo.itinerary.is_empty()
        assert cargo.delivery.transport_status == TransportStatus.NOT_RECEIVED.value
        assert cargo.delivery.routing_status == RoutingStatus.NOT_ROUTED.value

    def test_each_booking_gets_its_own_id(self):
        assert _book() != _book()

    def test_listing_returns_every_booked_cargo(self):
        booked = {_book() for _ in range(105)}
        listed = current_domain.repository_for(Cargo).find_all()
        assert {cargo.tracking_id for cargo in listed} == booked
        assert len(listed) == 105

    def test_unknown_origin(self):
        with pytest.raises(UnknownLocationError):
            _book(origin="ZZZZZ")

    def test_unknown_destination(self):
        with pytest.raises(UnknownLocationError):
            _book(destination="ZZZZZ")

    def test_missing_arguments(self):
        with pytest.raises(InvalidArgumentError) as exc:
            current_domain.process(BookNewCargo(origin="CNHKG"), asynchronous=False)
        assert "destination" in exc.value.messages
        assert "arrival_deadline" in exc.value.messages

    def test_invalid_argument_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            current_domain.process(BookNewCargo(), asynchronous=False)


class TestRouteCandidates:
    def test_candidates_satisfy_specification(self):
        tracking_id = _book()
        cargo = _cargo(tracking_id)
        routes = request_possible_routes(tracking_id)
        assert routes
        for itinerary in routes:
            assert itinerary.satisfies(cargo.route_specification)

    def test_unknown_cargo_has_no_candidates(self):
        assert request_possible_routes("NOPE0000") == []

    def test_router_receives_cargo_specification(self):
        tracking_id = _book()
        request_possible_routes(tracking_id)
        assert get_router().requests[-1] == _cargo(tracking_id).route_specification


class TestAssignCargoToRoute:
    def test_assigning_a_candidate_routes_the_cargo(self):
        tracking_id = _book()
        itinerary = _assign_first_route(tracking_id)
        cargo = _cargo(tracking_id)
        assert cargo.itinerary == itinerary
        assert cargo.delivery.routing_status == RoutingStatus.ROUTED.value
        assert cargo.delivery.next_expected_activity.event_type == "Receive"
        assert cargo.delivery.next_expected_activity.location == "CNHKG"

    def test_itinerary_is_not_checked_against_specification(self):
        tracking_id = _book()
        legs = [
            {
                "voyage_number": "V400",
                "load_location": "DEHAM",
                "unload_location": "FIHEL",
                "load_time": "2009-03-14T12:00:00+00:00",
                "unload_time": "2009-03-16T12:00:00+00:00",
            }
        ]
        current_domain.process(
            AssignCargoToRoute(tracking_id=tracking_id, legs=json.dumps(legs)),
            asynchronous=False,
        )
        assert _cargo(tracking_id).delivery.routing_status == RoutingStatus.MISROUTED.value

    def test_empty_itinerary_is_rejected(self):
        tracking_id = _book()
        with pytest.raises(InvalidArgumentError):
            current_domain.process(AssignCargoToRoute(tracking_id=tracking_id, legs="[]"), asynchronous=False)

    def test_unknown_cargo(self):
        legs = json.dumps([{"voyage_number": "V100", "load_location": "CNHKG", "unload_location": "USNYC"}])
        with pytest.raises(UnknownCargoError):
            current_domain.process(AssignCargoToRoute(tracking_id="NOPE0000", legs=legs), asynchronous=False)

    def test_unknown_cargo_is_a_not_found_error(self):
        legs = json.dumps([{"voyage_number": "V100", "load_location": "CNHKG", "unload_location": "USNYC"}])
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(AssignCargoToRoute(tracking_id="NOPE0000", legs=legs), asynchronous=False)


class TestRerouting:
    def test_change_destination_keeps_origin_and_deadline(self):
        tracking_id = _book()
        current_domain.process(ChangeDestination(tracking_id=tracking_id, destination="DEHAM"), asynchronous=False)
        spec = _cargo(tracking_id).route_specification
        assert spec.origin == "CNHKG"
        assert spec.destination == "DEHAM"
        assert spec.arrival_deadline == DEADLINE

    def test_change_destination_misroutes_routed_cargo(self):
        tracking_id = _book()
        itinerary = _assign_first_route(tracking_id)
        current_domain.process(ChangeDestination(tracking_id=tracking_id, destination="DEHAM"), asynchronous=False)
        cargo = _cargo(tracking_id)
        assert cargo.itinerary == itinerary
        assert cargo.delivery.routing_status == RoutingStatus.MISROUTED.value

    def test_change_destination_to_unknown_location(self):
        tracking_id = _book()
        with pytest.raises(UnknownLocationError):
            current_domain.process(
                ChangeDestination(tracking_id=tracking_id, destination="ZZZZZ"),
                asynchronous=False,
            )

    def test_specify_new_route_then_assign(self):
        tracking_id = _book()
        _assign_first_route(tracking_id)
        current_domain.process(
            SpecifyNewRoute(tracking_id=tracking_id, origin="JNTKO", destination="SESTO", arrival_deadline=DEADLINE),
            asynchronous=False,
        )
        assert _cargo(tracking_id).delivery.routing_status == RoutingStatus.MISROUTED.value

        _assign_first_route(tracking_id)
        cargo = _cargo(tracking_id)
        assert cargo.delivery.routing_status == RoutingStatus.ROUTED.value
        assert cargo.itinerary.initial_departure_location == "JNTKO"
        assert cargo.origin == "CNHKG"


class TestNaiveTimestamps:
    def test_naive_deadline_is_read_as_utc(self):
        tracking_id = _book(deadline=datetime(2009, 3, 18, 12))
        assert _cargo(tracking_id).route_specification.arrival_deadline == DEADLINE
        assert request_possible_routes(tracking_id)

    def test_offset_deadline_is_converted_to_utc(self):
        tracking_id = _book(deadline=datetime(2009, 3, 18, 14, tzinfo=timezone(timedelta(hours=2))))
        deadline = _cargo(tracking_id).route_specification.arrival_deadline
        assert deadline == DEADLINE
        assert deadline.utcoffset() == timedelta(0)

    def test_naive_leg_times_in_assigned_route(self):
        tracking_id = _book()
        legs = [
            {**leg, "load_time": leg["load_time"][:19], "unload_time": leg["unload_time"][:19]}
            for leg in request_possible_routes(tracking_id)[0].to_dicts()
        ]
        current_domain.process(
            AssignCargoToRoute(tracking_id=tracking_id, legs=json.dumps(legs)),
            asynchronous=False,
        )
        cargo = _cargo(tracking_id)
        assert cargo.delivery.routing_status == RoutingStatus.ROUTED.value
        assert cargo.itinerary.final_arrival_date.tzinfo is not None

    def test_naive_deadline_in_new_route_specification(self):
        tracking_id = _book()
        _assign_first_route(tracking_id)
        current_domain.process(
            SpecifyNewRoute(
                tracking_id=tracking_id,
                origin="CNHKG",
                destination="SESTO",
                arrival_deadline=datetime(2009, 3, 18, 12),
            ),
            asynchronous=False,
        )
        assert _cargo(tracking_id).delivery.routing_status == RoutingStatus.ROUTED.value
