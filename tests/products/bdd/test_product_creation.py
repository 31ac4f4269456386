"""BDD tests for product creation."""

from products.product.creation import CreateProduct
from products.product.product import Product
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/product_creation.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse('a product "{name}" is created with price {price:d}'),
    target_fixture="product_id",
)
def create_product(name, price, error):
    try:
        view = current_domain.process(CreateProduct(name=name, price=price), asynchronous=False)
    except ValidationError as exc:
        error["exc"] = exc
        return None
    return view["_id"]


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the created product has quantity {quantity:d}"))
def created_has_quantity(product_id, quantity):
    product = current_domain.repository_for(Product).get(product_id)
    assert product.quantity == quantity
