"""Routing adapter abstraction: pluggable route-finding collaborator."""

import os

_router_instance = None


def get_router():
    """Return the configured routing adapter (singleton).

    Uses FakeRouter by default. Select another adapter with the
    ROUTING_ADAPTER environment variable.
    """
    global _router_instance
    if _router_instance is None:
        adapter = os.environ.get("ROUTING_ADAPTER", "fake")
        if adapter == "fake":
            from shipping.routing.fake_adapter import FakeRouter

            _router_instance = FakeRouter()
        else:
            raise ValueError(f"Unknown routing adapter: {adapter}")
    return _router_instance


def reset_router():
    """Reset the routing singleton (useful for testing)."""
    global _router_instance
    _router_instance = None
