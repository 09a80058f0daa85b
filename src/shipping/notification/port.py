"""Cargo events port: the sink told about misdirected and arrived cargo."""

from abc import ABC, abstractmethod


class CargoEventsPort(ABC):
    """Abstract interface for cargo notification adapters."""

    @abstractmethod
    def cargo_was_misdirected(self, cargo) -> None:
        """The cargo was handled somewhere its itinerary does not account for."""
        ...

    @abstractmethod
    def cargo_has_arrived(self, cargo) -> None:
        """The cargo was unloaded at its final destination."""
        ...
