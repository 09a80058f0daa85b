"""Mixed shipping workload scenario.

Combines the cargo journeys with tracking reads in proportions that model a
booking office next to a public tracking page. This is the recommended
scenario for load baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.cargo import CargoLifecycleJourney, MisdirectionJourney, TrackingUser, UnroutableJourney


class MixedShippingUser(HttpUser):
    """Realistic mixed workload.

    Writes (60%):
    - Full lifecycle: booking, routing and handling along the itinerary
    - Misdirection: off-plan unloads followed by a destination change
    - Unroutable bookings

    Reads (40%):
    - Cargo listing and tracking, misdirection dashboard, locations
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        CargoLifecycleJourney: 35,
        MisdirectionJourney: 20,
        UnroutableJourney: 5,
        TrackingUser.list_cargos: 25,
        TrackingUser.misdirected_cargos: 10,
        TrackingUser.locations: 5,
    }
