"""Voyage aggregate: read-only reference data for scheduled carrier movements.

A voyage is an ordered schedule of carrier movements. Well-formed schedules
are consecutive (each movement departs where the previous one arrived), but
that is not enforced here.
"""

from datetime import datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String

from shipping.domain import shipping


@shipping.entity(part_of="Voyage")
class CarrierMovement:
    """One hop of a voyage between two locations."""

    departure_location = String(required=True, max_length=5)
    arrival_location = String(required=True, max_length=5)
    departure_time = DateTime()
    arrival_time = DateTime()
    sequence = Integer(required=True, min_value=0)


@shipping.aggregate
class Voyage:
    voyage_number = Identifier(identifier=True, required=True)
    movements = HasMany(CarrierMovement)

    @classmethod
    def create(cls, voyage_number: str, movements_data: list[dict]):
        """Build a voyage whose schedule follows the order of ``movements_data``."""
        voyage = cls(voyage_number=voyage_number)
        for position, movement_data in enumerate(movements_data):
            voyage.add_movements(CarrierMovement(sequence=position, **movement_data))
        return voyage

    @property
    def schedule(self) -> list[CarrierMovement]:
        return sorted(self.movements or [], key=lambda m: m.sequence)

    def departure_time_from(self, location: str) -> datetime | None:
        for movement in self.schedule:
            if movement.departure_location == location:
                return movement.departure_time
        return None

    def arrival_time_at(self, location: str) -> datetime | None:
        for movement in self.schedule:
            if movement.arrival_location == location:
                return movement.arrival_time
        return None
