"""Quantity adjustment: commands and handler.

Both commands funnel into ``ProductRepository.increment_quantity``. Callers
that may race on one product use ``process_adjustment``, which holds a
per-product lock until the unit of work has committed, so concurrent
adjustments are applied one after another instead of overwriting each other.
There is no floor: a decrease larger than the stock on hand leaves a
negative quantity.
"""

import threading
import weakref

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from products.domain import products
from products.exceptions import StoreUnavailableError
from products.product.product import Product

logger = structlog.get_logger(__name__)

# Entries disappear once no adjustment holds the lock
_PRODUCT_LOCKS: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_PRODUCT_LOCKS_GUARD = threading.Lock()


@products.command(part_of="Product")
class IncreaseQuantity:
    product_id: Identifier(required=True)
    value: Integer(required=True, min_value=1)


@products.command(part_of="Product")
class DecreaseQuantity:
    product_id: Identifier(required=True)
    value: Integer(required=True, min_value=1)


@products.command_handler(part_of=Product)
class QuantityAdjustmentHandler:
    @handle(IncreaseQuantity)
    def increase_quantity(self, command):
        return self._adjust(command.product_id, command.value)

    @handle(DecreaseQuantity)
    def decrease_quantity(self, command):
        return self._adjust(command.product_id, -command.value)

    def _adjust(self, product_id, delta):
        product = current_domain.repository_for(Product).increment_quantity(product_id, delta)
        logger.info(
            "Product quantity adjusted",
            product_id=str(product_id),
            quantity_change=delta,
            quantity=product.quantity,
        )
        return product.to_view()


def _product_lock(product_id) -> threading.Lock:
    key = str(product_id)
    with _PRODUCT_LOCKS_GUARD:
        lock = _PRODUCT_LOCKS.get(key)
        if lock is None:
            lock = threading.Lock()
            _PRODUCT_LOCKS[key] = lock
        return lock


def process_adjustment(command):
    """Process an Increase/DecreaseQuantity command as one serialized step.

    The product lock covers the whole command, including the unit of work
    commit and the change notification. Unknown ids raise ObjectNotFoundError
    without allocating a lock.
    """
    current_domain.repository_for(Product).get(command.product_id)

    with _product_lock(command.product_id):
        try:
            return current_domain.process(command, asynchronous=False)
        except ExpectedVersionError as exc:
            # Another process committed first
            raise StoreUnavailableError("increment", exc) from exc
