"""RouteSpecification: what any acceptable itinerary for a cargo must achieve."""

from protean.fields import DateTime, String

from shipping.domain import shipping


@shipping.value_object(part_of="Cargo")
class RouteSpecification:
    """Origin, destination and the latest acceptable arrival.

    An itinerary satisfies the specification when its first leg loads at
    the origin, its last leg unloads at the destination and, when a deadline
    is set, that last unload happens no later than the deadline.
    """

    origin = String(required=True, max_length=5)
    destination = String(required=True, max_length=5)
    arrival_deadline = DateTime()

    def is_satisfied_by(self, itinerary) -> bool:
        return itinerary.satisfies(self)

    def with_destination(self, destination: str) -> "RouteSpecification":
        return RouteSpecification(
            origin=self.origin,
            destination=destination,
            arrival_deadline=self.arrival_deadline,
        )
