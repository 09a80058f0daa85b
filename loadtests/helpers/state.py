"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. State tracks the tracking id returned by booking so follow-up
operations can reference it.
"""

from dataclasses import dataclass, field


@dataclass
class CargoState:
    """Tracks state for a single simulated cargo lifecycle."""

    tracking_id: str | None = None
    origin: str | None = None
    destination: str | None = None
    legs: list[dict] = field(default_factory=list)
    handled: list[str] = field(default_factory=list)
