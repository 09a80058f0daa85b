import os

import pytest


@pytest.fixture(scope="session")
def _shipping_domain(request):
    """Initialize the shipping domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from shipping.domain import shipping

    shipping.init()
    return shipping


@pytest.fixture(scope="session", autouse=True)
def setup_db(_shipping_domain):
    from shipping.utils.db import drop_db, setup_db

    setup_db(_shipping_domain)

    yield

    drop_db(_shipping_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_shipping_domain):
    """Push domain context and seed reference data before each test, cleanup after."""
    from shipping.reference.samples import seed_reference_data

    ctx = _shipping_domain.domain_context()
    ctx.push()
    seed_reference_data()

    yield

    from protean import current_domain
    from shipping.cargo.locking import reset_locks
    from shipping.notification import reset_notifier
    from shipping.routing import reset_router

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()

    reset_router()
    reset_notifier()
    reset_locks()
