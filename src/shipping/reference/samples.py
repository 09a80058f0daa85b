"""Sample ports and voyages, and the seeding routine that stores them."""

from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shipping.reference.location import Location
from shipping.reference.voyage import Voyage

logger = structlog.get_logger(__name__)

SESTO = "SESTO"
AUMEL = "AUMEL"
CNHKG = "CNHKG"
USNYC = "USNYC"
USCHI = "USCHI"
JNTKO = "JNTKO"
DEHAM = "DEHAM"
NLRTM = "NLRTM"
FIHEL = "FIHEL"

SAMPLE_LOCATIONS = {
    SESTO: "Stockholm",
    AUMEL: "Melbourne",
    CNHKG: "Hongkong",
    USNYC: "New York",
    USCHI: "Chicago",
    JNTKO: "Tokyo",
    DEHAM: "Hamburg",
    NLRTM: "Rotterdam",
    FIHEL: "Helsinki",
}


def _at(month: int, day: int, hour: int = 12) -> datetime:
    return datetime(2009, month, day, hour, tzinfo=UTC)


def _hop(departure: str, arrival: str, departs: datetime, arrives: datetime) -> dict:
    return {
        "departure_location": departure,
        "arrival_location": arrival,
        "departure_time": departs,
        "arrival_time": arrives,
    }


SAMPLE_VOYAGES = {
    "V100": [
        _hop(CNHKG, JNTKO, _at(3, 3), _at(3, 5)),
        _hop(JNTKO, USNYC, _at(3, 5, 18), _at(3, 9)),
    ],
    "V200": [
        _hop(USNYC, USCHI, _at(3, 10), _at(3, 14)),
        _hop(USCHI, SESTO, _at(3, 14, 18), _at(3, 17)),
    ],
    "V300": [
        _hop(JNTKO, NLRTM, _at(3, 8), _at(3, 11)),
        _hop(NLRTM, DEHAM, _at(3, 11, 18), _at(3, 12)),
        _hop(DEHAM, AUMEL, _at(3, 12, 18), _at(3, 20)),
        _hop(AUMEL, JNTKO, _at(3, 21), _at(3, 25)),
    ],
    "V400": [
        _hop(DEHAM, SESTO, _at(3, 14), _at(3, 15)),
        _hop(SESTO, FIHEL, _at(3, 15, 18), _at(3, 16)),
        _hop(FIHEL, DEHAM, _at(3, 16, 18), _at(3, 18)),
    ],
    # Referenced by routing services that do not publish schedules
    "0100S": [],
    "0200T": [],
    "0300A": [],
    "0301S": [],
    "0400S": [],
}


def _exists(repo, identifier: str) -> bool:
    try:
        repo.get(identifier)
    except ObjectNotFoundError:
        return False
    return True


def seed_reference_data() -> None:
    """Store every sample location and voyage that is not stored yet."""
    location_repo = current_domain.repository_for(Location)
    for unlocode, name in SAMPLE_LOCATIONS.items():
        if not _exists(location_repo, unlocode):
            location_repo.add(Location(unlocode=unlocode, name=name))

    voyage_repo = current_domain.repository_for(Voyage)
    for voyage_number, movements in SAMPLE_VOYAGES.items():
        if not _exists(voyage_repo, voyage_number):
            voyage_repo.add(Voyage.create(voyage_number, movements))

    logger.info(
        "Reference data seeded",
        locations=len(SAMPLE_LOCATIONS),
        voyages=len(SAMPLE_VOYAGES),
    )
