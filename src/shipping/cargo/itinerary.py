"""Itinerary: the committed plan of legs a cargo travels.

Legs are stored on the Cargo as ``Leg`` entities. ``Itinerary`` is a plain
immutable view over an ordered sequence of legs; equality is structural,
so two itineraries with the same legs in the same order are equal whatever
the identities of the underlying entities.

A routed itinerary is connected: each leg is loaded where the previous
one was unloaded. Routing services are trusted to deliver connected
itineraries; nothing here validates it.
"""

import json
from datetime import datetime

from protean.fields import DateTime, Integer, String

from shipping.domain import shipping
from shipping.handling.activity import HandlingEventType
from shipping.utils.timestamps import as_utc


@shipping.entity(part_of="Cargo")
class Leg:
    """One voyage segment of an itinerary, from load port to unload port."""

    voyage_number = String(required=True, max_length=20)
    load_location = String(required=True, max_length=5)
    unload_location = String(required=True, max_length=5)
    load_time = DateTime()
    unload_time = DateTime()
    sequence = Integer(default=0, min_value=0)


def _leg_key(leg) -> tuple:
    return (
        leg.voyage_number,
        leg.load_location,
        leg.unload_location,
        leg.load_time,
        leg.unload_time,
    )


def _parse_time(value):
    if value is None or isinstance(value, datetime):
        return as_utc(value)
    return as_utc(datetime.fromisoformat(value))


class Itinerary:
    def __init__(self, legs=()):
        self._legs = tuple(legs)

    @classmethod
    def from_dicts(cls, legs_data: list[dict]) -> "Itinerary":
        return cls(
            Leg(
                voyage_number=data["voyage_number"],
                load_location=data["load_location"],
                unload_location=data["unload_location"],
                load_time=_parse_time(data.get("load_time")),
                unload_time=_parse_time(data.get("unload_time")),
                sequence=position,
            )
            for position, data in enumerate(legs_data)
        )

    @classmethod
    def from_json(cls, text: str) -> "Itinerary":
        return cls.from_dicts(json.loads(text) if text else [])

    def to_dicts(self) -> list[dict]:
        return [
            {
                "voyage_number": leg.voyage_number,
                "load_location": leg.load_location,
                "unload_location": leg.unload_location,
                "load_time": leg.load_time.isoformat() if leg.load_time else None,
                "unload_time": leg.unload_time.isoformat() if leg.unload_time else None,
            }
            for leg in self._legs
        ]

    def to_json(self) -> str:
        return json.dumps(self.to_dicts())

    # -------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------
    @property
    def legs(self) -> tuple:
        return self._legs

    def is_empty(self) -> bool:
        return not self._legs

    @property
    def first_leg(self):
        return self._legs[0] if self._legs else None

    @property
    def last_leg(self):
        return self._legs[-1] if self._legs else None

    @property
    def initial_departure_location(self) -> str | None:
        return self._legs[0].load_location if self._legs else None

    @property
    def final_arrival_location(self) -> str | None:
        return self._legs[-1].unload_location if self._legs else None

    @property
    def final_arrival_date(self) -> datetime | None:
        return self._legs[-1].unload_time if self._legs else None

    def next_leg_after(self, leg):
        """The leg following ``leg``, or None when ``leg`` is the last one."""
        for position, candidate in enumerate(self._legs[:-1]):
            if candidate is leg:
                return self._legs[position + 1]
        return None

    # -------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------
    def legs_matching_load(self, voyage_number: str | None, location: str | None) -> list:
        return [
            leg for leg in self._legs if leg.voyage_number == voyage_number and leg.load_location == location
        ]

    def legs_matching_unload(self, voyage_number: str | None, location: str | None) -> list:
        return [
            leg for leg in self._legs if leg.voyage_number == voyage_number and leg.unload_location == location
        ]

    def is_expected(self, event) -> bool:
        """Whether the plan accounts for a handling event.

        ``event`` needs ``event_type``, ``location`` and ``voyage_number``;
        handling events and handling activities both qualify.
        """
        if self.is_empty():
            return False

        event_type = HandlingEventType(event.event_type)
        if event_type == HandlingEventType.RECEIVE:
            return self.initial_departure_location == event.location
        if event_type == HandlingEventType.LOAD:
            return bool(self.legs_matching_load(event.voyage_number, event.location))
        if event_type == HandlingEventType.UNLOAD:
            return bool(self.legs_matching_unload(event.voyage_number, event.location))
        if event_type == HandlingEventType.CLAIM:
            return self.final_arrival_location == event.location
        if event_type == HandlingEventType.CUSTOMS:
            return True
        return False

    def satisfies(self, route_specification) -> bool:
        """Whether this itinerary fulfils origin, destination and deadline of the specification."""
        if self.is_empty() or route_specification is None:
            return False
        if self.initial_departure_location != route_specification.origin:
            return False
        if self.final_arrival_location != route_specification.destination:
            return False
        deadline = route_specification.arrival_deadline
        if deadline is None:
            return True
        return self.final_arrival_date is not None and self.final_arrival_date <= deadline

    # -------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Itinerary):
            return NotImplemented
        return [_leg_key(leg) for leg in self._legs] == [_leg_key(leg) for leg in other._legs]

    def __hash__(self) -> int:
        return hash(tuple(_leg_key(leg) for leg in self._legs))

    def __len__(self) -> int:
        return len(self._legs)

    def __iter__(self):
        return iter(self._legs)

    def __repr__(self) -> str:
        route = " -> ".join(
            [self._legs[0].load_location] + [leg.unload_location for leg in self._legs] if self._legs else []
        )
        return f"Itinerary({route or 'empty'})"
