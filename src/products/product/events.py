"""Change notifications for the Product aggregate.

Each event carries the public view of the product (id, name, quantity,
price) at the moment of the change, so consumers never need to read the
store back.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String

from products.domain import products


@products.event(part_of="Product")
class ProductCreated:
    """A product was added to the collection."""

    product_id: Identifier(required=True)
    name: String(required=True)
    quantity: Integer(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)


@products.event(part_of="Product")
class ProductUpdated:
    """A product's fields changed, either by update or by a quantity adjustment."""

    product_id: Identifier(required=True)
    name: String(required=True)
    quantity: Integer(required=True)
    price: Float(required=True)
    quantity_change: Integer(default=0)  # Signed; 0 when quantity did not move
    updated_at: DateTime(required=True)


@products.event(part_of="Product")
class ProductRemoved:
    """A product was deleted from the collection."""

    product_id: Identifier(required=True)
    name: String(required=True)
    quantity: Integer(required=True)
    price: Float(required=True)
    removed_at: DateTime(required=True)
