"""Sample data for an empty products collection."""

import json

import structlog
from protean.domain import Domain
from protean.utils.globals import current_domain

from products.product.creation import InsertProducts
from products.product.product import Product

logger = structlog.get_logger(__name__)

SAMPLE_PRODUCTS = (
    {"name": "Samsung Galaxy S10 Plus", "quantity": 10, "price": 704},
    {"name": "iPhone 11 Pro", "quantity": 25, "price": 999},
    {"name": "Huawei P30 Pro", "quantity": 15, "price": 679},
)


def seed_products():
    """Insert the sample products if the collection is empty.

    Must run inside a domain context. Returns the number of products
    inserted. Failures propagate; there is no retry.
    """
    existing = current_domain.repository_for(Product).count()
    if existing:
        logger.info("Products collection already populated, skipping seed", count=existing)
        return 0

    logger.info("Seeding products collection", count=len(SAMPLE_PRODUCTS))
    inserted = current_domain.process(
        InsertProducts(entities=json.dumps(list(SAMPLE_PRODUCTS))),
        asynchronous=False,
    )
    return len(inserted)


def seed_db(domain: Domain):
    """Seed ``domain`` inside its own domain context."""
    with domain.domain_context():
        return seed_products()
