"""Product aggregate root.

Field declarations double as the entity validator: ``name`` needs at least
three characters and ``price`` must be strictly positive. ``quantity`` has
no floor; adjustments may drive it negative.
"""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from products.domain import products

# Public field set, in response order
PRODUCT_FIELDS = ("_id", "name", "quantity", "price")


@products.aggregate
class Product:
    """A sellable item and the quantity currently held."""

    name: String(required=True, min_length=3, max_length=255)
    quantity: Integer(default=0)
    price: Float(required=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Price must be a positive number"]})

    @classmethod
    def create(cls, name, price):
        """Create a new product. Quantity always starts at zero."""
        return cls._new(name=name, price=price, quantity=0)

    @classmethod
    def import_entity(cls, name, price, quantity=0):
        """Create a product that keeps the caller's quantity (bulk insert, seeding)."""
        return cls._new(name=name, price=price, quantity=quantity if quantity is not None else 0)

    @classmethod
    def _new(cls, name, price, quantity):
        from products.product.events import ProductCreated

        now = datetime.now()
        product = cls(name=name, price=price, quantity=quantity, created_at=now, updated_at=now)
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                quantity=product.quantity,
                price=product.price,
                created_at=now,
            )
        )
        return product

    def to_view(self):
        """Public representation: only the fields in ``PRODUCT_FIELDS``."""
        return {
            "_id": str(self.id),
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
        }

    def adjust_quantity(self, delta):
        """Apply a signed delta to the quantity."""
        if not isinstance(delta, int) or isinstance(delta, bool) or delta == 0:
            raise ValidationError({"quantity": ["Quantity change must be a non-zero integer"]})

        self.quantity = (self.quantity or 0) + delta
        self.updated_at = datetime.now()
        self._raise_updated(quantity_change=delta)

    def update_details(self, name=None, quantity=None, price=None):
        """Partially update the product. Returns True when anything changed."""
        previous_quantity = self.quantity or 0
        changed = False

        with atomic_change(self):
            if name is not None and name != self.name:
                self.name = name
                changed = True
            if quantity is not None and quantity != self.quantity:
                self.quantity = quantity
                changed = True
            if price is not None and price != self.price:
                self.price = price
                changed = True

        if not changed:
            return False

        self.updated_at = datetime.now()
        self._raise_updated(quantity_change=(self.quantity or 0) - previous_quantity)
        return True

    def mark_removed(self):
        from products.product.events import ProductRemoved

        self.raise_(
            ProductRemoved(
                product_id=self.id,
                name=self.name,
                quantity=self.quantity,
                price=self.price,
                removed_at=datetime.now(),
            )
        )

    def _raise_updated(self, quantity_change):
        from products.product.events import ProductUpdated

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                quantity=self.quantity,
                price=self.price,
                quantity_change=quantity_change,
                updated_at=self.updated_at,
            )
        )
