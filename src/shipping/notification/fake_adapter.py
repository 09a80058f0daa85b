"""Fake cargo notifier: records notifications so tests can assert on them."""

from shipping.notification.port import CargoEventsPort


class RecordingNotifier(CargoEventsPort):
    def __init__(self):
        self.misdirected: list[str] = []
        self.arrived: list[str] = []

    def cargo_was_misdirected(self, cargo) -> None:
        self.misdirected.append(cargo.tracking_id)

    def cargo_has_arrived(self, cargo) -> None:
        self.arrived.append(cargo.tracking_id)
