"""Product creation: commands and handler.

``CreateProduct`` has no quantity field: new products always start at zero.
``InsertProducts`` is the bulk path and keeps whatever quantity each entity
carries.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from products.domain import products
from products.product.product import Product

logger = structlog.get_logger(__name__)


@products.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    price: Float(required=True)


@products.command(part_of="Product")
class InsertProducts:
    entities: Text(required=True)  # JSON list of {name, price, quantity?}


def _parse_entities(raw):
    entities = json.loads(raw) if isinstance(raw, str) else raw
    if isinstance(entities, dict):
        entities = [entities]
    if not isinstance(entities, list) or not entities:
        raise ValidationError({"entities": ["At least one entity is required"]})
    return entities


@products.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(name=command.name, price=command.price)
        current_domain.repository_for(Product).insert(product)
        logger.info("Product created", product_id=str(product.id), name=product.name)
        return product.to_view()

    @handle(InsertProducts)
    def insert_products(self, command):
        new_products = [
            Product.import_entity(
                name=entity.get("name"),
                price=entity.get("price"),
                quantity=entity.get("quantity", 0),
            )
            for entity in _parse_entities(command.entities)
        ]
        current_domain.repository_for(Product).insert_many(new_products)
        logger.info("Products inserted", count=len(new_products))
        return [product.to_view() for product in new_products]
