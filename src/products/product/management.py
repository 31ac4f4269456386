"""Product update and removal: commands and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from products.domain import products
from products.product.product import Product

logger = structlog.get_logger(__name__)


@products.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    quantity: Integer()
    price: Float()


@products.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@products.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        product = current_domain.repository_for(Product).update_by_id(
            command.product_id,
            name=command.name,
            quantity=command.quantity,
            price=command.price,
        )
        logger.info("Product updated", product_id=str(product.id))
        return product.to_view()

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.delete(repo.get(command.product_id))
        logger.info("Product removed", product_id=str(product.id))
        return product.to_view()
