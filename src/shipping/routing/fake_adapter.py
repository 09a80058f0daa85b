"""Fake routing adapter: fixed candidate itineraries for tests and development.

Cargo leaving Hongkong is offered the V100/V200/V300 route via New York and
Chicago; cargo leaving anywhere else is offered V300/V400 from Tokyo via
Hamburg. Candidates that do not satisfy the requested specification are
dropped.
"""

from datetime import UTC, datetime

from shipping.cargo.itinerary import Itinerary
from shipping.reference.samples import CNHKG, DEHAM, JNTKO, SESTO, USCHI, USNYC
from shipping.routing.port import RoutingPort


def _at(month: int, day: int) -> datetime:
    return datetime(2009, month, day, 12, tzinfo=UTC)


def _leg(voyage_number: str, load: str, unload: str, loads_at: datetime, unloads_at: datetime) -> dict:
    return {
        "voyage_number": voyage_number,
        "load_location": load,
        "unload_location": unload,
        "load_time": loads_at,
        "unload_time": unloads_at,
    }


HONGKONG_ROUTE = [
    _leg("V100", CNHKG, USNYC, _at(3, 3), _at(3, 9)),
    _leg("V200", USNYC, USCHI, _at(3, 10), _at(3, 14)),
    _leg("V300", USCHI, SESTO, _at(3, 7), _at(3, 11)),
]

TOKYO_ROUTE = [
    _leg("V300", JNTKO, DEHAM, _at(3, 8), _at(3, 12)),
    _leg("V400", DEHAM, SESTO, _at(3, 14), _at(3, 15)),
]


class FakeRouter(RoutingPort):
    """Fake router returning canned itineraries."""

    def __init__(self):
        self.should_succeed = True
        self.candidates: list[list[dict]] | None = None
        self.requests: list = []

    def configure(self, should_succeed: bool = True, candidates: list[list[dict]] | None = None):
        """Configure the fake router for testing.

        ``candidates`` replaces the canned routes; each candidate is a list of
        leg dicts. Filtering against the specification still applies.
        """
        self.should_succeed = should_succeed
        self.candidates = candidates

    def _candidates_for(self, route_specification) -> list[list[dict]]:
        if self.candidates is not None:
            return self.candidates
        if route_specification.origin == CNHKG:
            return [HONGKONG_ROUTE]
        return [TOKYO_ROUTE]

    def fetch_routes_for_specification(self, route_specification) -> list[Itinerary]:
        self.requests.append(route_specification)
        if not self.should_succeed:
            return []
        itineraries = [Itinerary.from_dicts(legs) for legs in self._candidates_for(route_specification)]
        return [itinerary for itinerary in itineraries if itinerary.satisfies(route_specification)]
