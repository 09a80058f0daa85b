"""HandlingEventFactory: turns raw identifiers into a validated HandlingEvent.

The factory only checks that the referenced cargo, voyage and location exist.
It never checks the event against the cargo's itinerary; an event the plan
does not account for is still a fact, and derivation reports it as
misdirection later.
"""

from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo
from shipping.errors import UnknownCargoError, UnknownLocationError, UnknownVoyageError
from shipping.handling.handling_event import HandlingEvent
from shipping.reference.location import Location
from shipping.reference.voyage import Voyage


class HandlingEventFactory:
    """Builds handling events after checking referential integrity.

    ``cargos``, ``voyages`` and ``locations`` are lookups exposing
    ``get(identifier)`` that raise ``ObjectNotFoundError`` for unknown
    identifiers, which is what protean repositories do.
    """

    def __init__(self, cargos, voyages, locations):
        self.cargos = cargos
        self.voyages = voyages
        self.locations = locations

    @classmethod
    def from_domain(cls) -> "HandlingEventFactory":
        return cls(
            cargos=current_domain.repository_for(Cargo),
            voyages=current_domain.repository_for(Voyage),
            locations=current_domain.repository_for(Location),
        )

    def create_handling_event(
        self,
        registered_at: datetime,
        completed_at: datetime,
        tracking_id: str,
        voyage_number: str | None,
        unlocode: str,
        event_type: str,
    ) -> HandlingEvent:
        try:
            self.cargos.get(tracking_id)
        except ObjectNotFoundError as exc:
            raise UnknownCargoError({"tracking_id": [f"Unknown cargo {tracking_id}"]}) from exc

        if voyage_number:
            try:
                self.voyages.get(voyage_number)
            except ObjectNotFoundError as exc:
                raise UnknownVoyageError({"voyage_number": [f"Unknown voyage {voyage_number}"]}) from exc

        try:
            self.locations.get(unlocode)
        except ObjectNotFoundError as exc:
            raise UnknownLocationError({"location": [f"Unknown location {unlocode}"]}) from exc

        return HandlingEvent.register(
            tracking_id=tracking_id,
            event_type=event_type,
            location=unlocode,
            completed_at=completed_at,
            registered_at=registered_at,
            voyage_number=voyage_number or None,
        )
