"""Per-cargo serialization of read, derive and store sequences.

Every operation that loads a cargo, re-derives its delivery and stores it
runs inside ``cargo_lock(tracking_id)``. Two such sequences for the same
cargo never interleave, so a handling event registered while the cargo is
being rerouted cannot overwrite the reroute, or be overwritten by it.

The locks are re-entrant: command processing takes the lock and the
synchronous event handlers it triggers take it again on the same thread.
Locks live in the serving process. Event processing is synchronous in every
configuration so inspection never runs in another process, and the API is
served by a single worker.

A lock is dropped from the registry once nobody holds or waits for it, so
the registry only grows with the number of cargos being worked on.
"""

import threading
from contextlib import contextmanager

import structlog
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)

_registry_guard = threading.Lock()
# tracking id -> [lock, number of holders and waiters]
_locks: dict[str, list] = {}


def _checkout(tracking_id: str) -> threading.RLock:
    with _registry_guard:
        entry = _locks.get(tracking_id)
        if entry is None:
            entry = _locks[tracking_id] = [threading.RLock(), 0]
        entry[1] += 1
        return entry[0]


def _checkin(tracking_id: str) -> None:
    with _registry_guard:
        entry = _locks.get(tracking_id)
        if entry is None:
            return
        entry[1] -= 1
        if entry[1] == 0:
            del _locks[tracking_id]


@contextmanager
def cargo_lock(tracking_id: str):
    """Hold the exclusive lock for one cargo for the duration of the block."""
    lock = _checkout(tracking_id)
    try:
        with lock:
            yield
    finally:
        _checkin(tracking_id)


def process_serialized(command, tracking_id: str):
    """Process ``command`` synchronously while holding the cargo's lock."""
    with cargo_lock(tracking_id):
        logger.debug("Processing command under cargo lock", command=command.__class__.__name__, tracking_id=tracking_id)
        return current_domain.process(command, asynchronous=False)


def held_locks() -> int:
    """Number of cargos with a lock currently held or awaited."""
    with _registry_guard:
        return len(_locks)


def reset_locks() -> None:
    with _registry_guard:
        _locks.clear()
