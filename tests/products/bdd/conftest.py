"""Shared BDD fixtures and step definitions for the Products domain."""

import json

import pytest
from products.product.creation import InsertProducts
from products.product.product import Product
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a stored product "{name}" with quantity {quantity:d} and price {price:d}'),
    target_fixture="product_id",
)
def stored_product(name, quantity, price):
    views = current_domain.process(
        InsertProducts(entities=json.dumps([{"name": name, "quantity": quantity, "price": price}])),
        asynchronous=False,
    )
    return views[0]["_id"]


@given("an unknown product", target_fixture="product_id")
def unknown_product():
    return "no-such-product"


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the stored quantity is {quantity:d}"))
def stored_quantity_is(product_id, quantity):
    assert current_domain.repository_for(Product).get(product_id).quantity == quantity


@then(parsers.cfparse("the collection holds {count:d} products"))
def collection_holds(count):
    assert current_domain.repository_for(Product).count() == count


@then("the request is rejected as invalid")
def rejected_as_invalid(error):
    assert isinstance(error["exc"], ValidationError)


@then("the product is reported as not found")
def reported_not_found(error):
    assert isinstance(error["exc"], ObjectNotFoundError)


@then(parsers.cfparse('a "{event_type}" change notification was recorded'))
def change_notification_recorded(product_id, event_type):
    messages = current_domain.event_store.store.read("products::product")
    matching = [
        m
        for m in messages
        if m.metadata.headers.type == f"Products.{event_type}.v1" and m.data.get("product_id") == product_id
    ]
    assert len(matching) >= 1
