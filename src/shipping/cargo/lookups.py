"""Repository lookups that translate not-found into the shipping error kinds."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo
from shipping.errors import UnknownCargoError, UnknownLocationError
from shipping.reference.location import Location


def load_cargo(tracking_id: str) -> Cargo:
    try:
        return current_domain.repository_for(Cargo).get(tracking_id)
    except ObjectNotFoundError as exc:
        raise UnknownCargoError({"tracking_id": [f"Unknown cargo {tracking_id}"]}) from exc


def ensure_location_exists(unlocode: str, field: str = "location") -> None:
    try:
        current_domain.repository_for(Location).get(unlocode)
    except ObjectNotFoundError as exc:
        raise UnknownLocationError({field: [f"Unknown location {unlocode}"]}) from exc
