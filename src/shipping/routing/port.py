"""Routing port: interface to the route-finding collaborator.

How routes are searched for is the adapter's business. The domain only
relies on the contract that every returned itinerary satisfies the route
specification it was asked for.
"""

from abc import ABC, abstractmethod


class RoutingPort(ABC):
    """Abstract interface for routing adapters."""

    @abstractmethod
    def fetch_routes_for_specification(self, route_specification) -> list:
        """Return candidate itineraries for a route specification.

        Returns:
            list of ``Itinerary``, possibly empty; each one satisfies
            ``route_specification``.
        """
        ...
