"""Repository for the Product aggregate.

Explicit store operations for the products collection. Everything the
handlers and the API read or write goes through these methods; backend
failures come out as ``StoreUnavailableError``.
"""

import functools
import math

from protean.exceptions import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from products.domain import products
from products.exceptions import StoreUnavailableError
from products.product.product import Product
from products.utils import settings

SORTABLE_FIELDS = frozenset({"name", "quantity", "price", "created_at", "updated_at"})


def store_operation(name):
    """Translate backend failures inside a repository method into StoreUnavailableError."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (SQLAlchemyError, ConnectionError) as exc:
                raise StoreUnavailableError(name, exc) from exc

        return wrapper

    return decorator


def _validate_sort(sort):
    if not sort:
        return "name"
    field = sort[1:] if sort.startswith("-") else sort
    if field not in SORTABLE_FIELDS:
        raise ValidationError({"sort": [f"Cannot sort by '{field}'"]})
    return sort


@products.repository(part_of=Product)
class ProductRepository:
    @store_operation("list")
    def list(self, page=1, page_size=None, sort=None):
        """Paginated listing in the ``{rows, total, page, pageSize, totalPages}`` envelope."""
        page_size = page_size or settings.PAGE_SIZE
        if page < 1:
            raise ValidationError({"page": ["Page must be 1 or greater"]})
        if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
            raise ValidationError({"pageSize": [f"Page size must be between 1 and {settings.MAX_PAGE_SIZE}"]})

        results = (
            self._dao.query.order_by(_validate_sort(sort)).offset((page - 1) * page_size).limit(page_size).all()
        )
        return {
            "rows": results.items,
            "total": results.total,
            "page": page,
            "pageSize": page_size,
            "totalPages": math.ceil(results.total / page_size) if results.total else 0,
        }

    @store_operation("find")
    def find(self, search=None, limit=None, offset=0, sort=None):
        """Products whose name contains ``search`` (case-insensitive)."""
        query = self._dao.query
        if search:
            query = query.filter(name__icontains=search)
        limit = limit or settings.MAX_PAGE_SIZE
        return query.order_by(_validate_sort(sort)).offset(offset).limit(limit).all().items

    @store_operation("count")
    def count(self, search=None):
        query = self._dao.query
        if search:
            query = query.filter(name__icontains=search)
        return query.all().total

    @store_operation("insert")
    def insert(self, product):
        self.add(product)
        return product

    @store_operation("insert")
    def insert_many(self, new_products):
        for product in new_products:
            self.add(product)
        return new_products

    @store_operation("update")
    def update_by_id(self, product_id, name=None, quantity=None, price=None):
        product = self.get(product_id)
        if product.update_details(name=name, quantity=quantity, price=price):
            self.add(product)
        return product

    @store_operation("increment")
    def increment_quantity(self, product_id, delta):
        """Add a signed delta to the stored quantity.

        The write lands when the surrounding unit of work commits; callers that
        race on the same product go through ``quantity.process_adjustment``,
        which holds the product lock across that commit. Raises
        ObjectNotFoundError before touching the store when the product does
        not exist.
        """
        product = self.get(product_id)
        product.adjust_quantity(delta)
        self.add(product)
        return product

    @store_operation("delete")
    def delete(self, product):
        product.mark_removed()
        self.add(product)
        self._dao.delete(product)
        return product
