"""Tests for the Location and Voyage reference data."""

from datetime import UTC, datetime

from protean import current_domain
from shipping.reference.location import Location
from shipping.reference.samples import SAMPLE_LOCATIONS, SAMPLE_VOYAGES, seed_reference_data
from shipping.reference.voyage import Voyage


class TestVoyage:
    def test_schedule_follows_given_order(self):
        voyage = Voyage.create("V100", SAMPLE_VOYAGES["V100"])
        assert [m.departure_location for m in voyage.schedule] == ["CNHKG", "JNTKO"]
        assert [m.arrival_location for m in voyage.schedule] == ["JNTKO", "USNYC"]

    def test_departure_and_arrival_times(self):
        voyage = Voyage.create("V400", SAMPLE_VOYAGES["V400"])
        assert voyage.departure_time_from("DEHAM") == datetime(2009, 3, 14, 12, tzinfo=UTC)
        assert voyage.arrival_time_at("SESTO") == datetime(2009, 3, 15, 12, tzinfo=UTC)
        assert voyage.arrival_time_at("CNHKG") is None

    def test_voyage_without_schedule(self):
        voyage = Voyage.create("0100S", [])
        assert voyage.schedule == []
        assert voyage.departure_time_from("SESTO") is None


class TestSeeding:
    def test_locations_are_seeded(self):
        locations = current_domain.repository_for(Location).find_all()
        assert {loc.unlocode for loc in locations} == set(SAMPLE_LOCATIONS)
        assert current_domain.repository_for(Location).get("SESTO").name == "Stockholm"

    def test_voyages_are_seeded(self):
        voyage = current_domain.repository_for(Voyage).get("V300")
        assert len(voyage.schedule) == len(SAMPLE_VOYAGES["V300"])
        assert current_domain.repository_for(Voyage).get("0400S").schedule == []

    def test_seeding_is_idempotent(self):
        seed_reference_data()
        seed_reference_data()
        assert len(current_domain.repository_for(Location).find_all()) == len(SAMPLE_LOCATIONS)
