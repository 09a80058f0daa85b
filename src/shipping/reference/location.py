"""Location aggregate: read-only reference data for ports.

A location is identified by its UN/LOCODE (five characters, e.g. ``SESTO``).
Locations are seeded once and never change afterwards.
"""

from protean.fields import Identifier, String

from shipping.domain import shipping
from shipping.utils.queries import fetch_all


@shipping.aggregate
class Location:
    """A port or terminal where cargo can be handled."""

    unlocode = Identifier(identifier=True, required=True)
    name = String(required=True, max_length=100)


@shipping.repository(part_of=Location)
class LocationRepository:
    def find_all(self) -> list[Location]:
        return fetch_all(self._dao.query, "unlocode")
