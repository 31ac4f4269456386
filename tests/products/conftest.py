import os

import pytest


@pytest.fixture(scope="session")
def _products_domain(request):
    """Initialize the products domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from products.domain import products

    products.init()
    return products


@pytest.fixture(scope="session", autouse=True)
def setup_db(_products_domain):
    from products.utils.db import drop_db, setup_db

    setup_db(_products_domain)

    yield

    drop_db(_products_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_products_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _products_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
