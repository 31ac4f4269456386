"""FastAPI endpoints for the Products domain."""

import json

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from products.api.schemas import (
    CountResponse,
    CreateProductRequest,
    InsertProductsRequest,
    ProductChangeResponse,
    ProductListResponse,
    ProductResponse,
    QuantityChangeRequest,
    UpdateProductRequest,
)
from products.product.creation import CreateProduct, InsertProducts
from products.product.management import RemoveProduct, UpdateProduct
from products.product.product import Product
from products.product.quantity import DecreaseQuantity, IncreaseQuantity, process_adjustment
from products.projections.product_changes import changes_for

product_router = APIRouter(prefix="/products", tags=["products"])


# --- Queries ---


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, alias="pageSize", ge=1),
    sort: str | None = None,
) -> ProductListResponse:
    result = current_domain.repository_for(Product).list(page=page, page_size=page_size, sort=sort)
    return ProductListResponse(
        rows=[ProductResponse.from_view(product.to_view()) for product in result["rows"]],
        total=result["total"],
        page=result["page"],
        page_size=result["pageSize"],
        total_pages=result["totalPages"],
    )


@product_router.get("/find", response_model=list[ProductResponse])
async def find_products(
    search: str | None = None,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    sort: str | None = None,
) -> list[ProductResponse]:
    found = current_domain.repository_for(Product).find(search=search, limit=limit, offset=offset, sort=sort)
    return [ProductResponse.from_view(product.to_view()) for product in found]


@product_router.get("/count", response_model=CountResponse)
async def count_products(search: str | None = None) -> CountResponse:
    return CountResponse(count=current_domain.repository_for(Product).count(search=search))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_view(product.to_view())


@product_router.get("/{product_id}/changes", response_model=list[ProductChangeResponse])
async def product_changes(product_id: str) -> list[ProductChangeResponse]:
    return [
        ProductChangeResponse(
            change_type=entry.change_type,
            name=entry.name,
            quantity=entry.quantity,
            price=entry.price,
            quantity_change=entry.quantity_change,
            occurred_at=entry.occurred_at.isoformat(),
        )
        for entry in changes_for(product_id)
    ]


# --- Commands ---


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(name=body.name, price=body.price)
    view = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_view(view)


@product_router.post("/insert", status_code=201, response_model=list[ProductResponse])
async def insert_products(body: InsertProductsRequest) -> list[ProductResponse]:
    command = InsertProducts(entities=json.dumps([entity.model_dump() for entity in body.entities]))
    views = current_domain.process(command, asynchronous=False)
    return [ProductResponse.from_view(view) for view in views]


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        quantity=body.quantity,
        price=body.price,
    )
    view = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_view(view)


@product_router.delete("/{product_id}", response_model=ProductResponse)
async def remove_product(product_id: str) -> ProductResponse:
    command = RemoveProduct(product_id=product_id)
    view = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_view(view)


@product_router.put("/{product_id}/quantity/increase", response_model=ProductResponse)
async def increase_quantity(product_id: str, body: QuantityChangeRequest) -> ProductResponse:
    command = IncreaseQuantity(product_id=product_id, value=body.value)
    view = process_adjustment(command)
    return ProductResponse.from_view(view)


@product_router.put("/{product_id}/quantity/decrease", response_model=ProductResponse)
async def decrease_quantity(product_id: str, body: QuantityChangeRequest) -> ProductResponse:
    command = DecreaseQuantity(product_id=product_id, value=body.value)
    view = process_adjustment(command)
    return ProductResponse.from_view(view)
