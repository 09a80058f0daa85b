"""Shipping bounded context: Cargo Booking, Handling and Delivery Tracking.

Tracks cargo moving through a multi-leg transport network. Handling events
observed in the physical world are appended to a per-cargo history, and each
cargo's delivery snapshot is re-derived from its itinerary and that history.
"""

from protean.domain import Domain

from shipping.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

shipping = Domain(name="shipping")
