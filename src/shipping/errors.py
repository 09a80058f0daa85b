"""Error kinds surfaced to callers of booking and handling operations.

Lookup failures are ``ObjectNotFoundError`` subclasses so callers that already
handle protean's not-found error keep working; argument failures are
``ValidationError`` subclasses carrying the usual ``{field: [message]}`` payload.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class UnknownCargoError(ObjectNotFoundError):
    """No cargo is booked under the given tracking id."""


class UnknownVoyageError(ObjectNotFoundError):
    """No voyage exists with the given voyage number."""


class UnknownLocationError(ObjectNotFoundError):
    """No location exists with the given UN/LOCODE."""


class InvalidArgumentError(ValidationError):
    """A required argument is missing, zero, or not allowed."""
