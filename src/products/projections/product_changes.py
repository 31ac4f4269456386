"""Product change log: append-only record of every change notification."""

import uuid
from enum import Enum

from protean.core.projector import on
from protean.fields import DateTime, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from products.domain import products
from products.product.events import ProductCreated, ProductRemoved, ProductUpdated
from products.product.product import Product


class ChangeType(Enum):
    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


@products.projection
class ProductChangeLog:
    entry_id: Identifier(identifier=True, required=True)
    product_id: Identifier(required=True)
    change_type: String(required=True, choices=ChangeType)
    name: String(required=True)
    quantity: Integer(default=0)
    price: Float()
    quantity_change: Integer(default=0)
    occurred_at: DateTime(required=True)


def _add_entry(event, change_type, occurred_at, quantity_change=0):
    current_domain.repository_for(ProductChangeLog).add(
        ProductChangeLog(
            entry_id=str(uuid.uuid4()),
            product_id=event.product_id,
            change_type=change_type,
            name=event.name,
            quantity=event.quantity,
            price=event.price,
            quantity_change=quantity_change,
            occurred_at=occurred_at,
        )
    )


def changes_for(product_id):
    """Change log entries for one product, oldest first."""
    entries = (
        current_domain.repository_for(ProductChangeLog)
        ._dao.query.filter(product_id=str(product_id))
        .order_by("occurred_at")
        .all()
        .items
    )
    return entries


@products.projector(projector_for=ProductChangeLog, aggregates=[Product])
class ProductChangeLogProjector:
    @on(ProductCreated)
    def on_product_created(self, event):
        _add_entry(event, ChangeType.CREATED.value, event.created_at, quantity_change=event.quantity)

    @on(ProductUpdated)
    def on_product_updated(self, event):
        _add_entry(event, ChangeType.UPDATED.value, event.updated_at, quantity_change=event.quantity_change)

    @on(ProductRemoved)
    def on_product_removed(self, event):
        _add_entry(event, ChangeType.REMOVED.value, event.removed_at, quantity_change=-(event.quantity or 0))
