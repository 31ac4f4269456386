"""BDD tests for quantity adjustment."""

from products.product.quantity import DecreaseQuantity, IncreaseQuantity, process_adjustment
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import parsers, scenarios, when

scenarios("features/quantity_adjustment.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the quantity is increased by {value:d}"))
def increase_quantity(product_id, value, error):
    try:
        process_adjustment(IncreaseQuantity(product_id=product_id, value=value))
    except (ValidationError, ObjectNotFoundError) as exc:
        error["exc"] = exc


@when(parsers.cfparse("the quantity is decreased by {value:d}"))
def decrease_quantity(product_id, value, error):
    try:
        process_adjustment(DecreaseQuantity(product_id=product_id, value=value))
    except (ValidationError, ObjectNotFoundError) as exc:
        error["exc"] = exc
