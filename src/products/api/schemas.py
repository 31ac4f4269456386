"""Pydantic request/response schemas for the Products API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateProductRequest(BaseModel):
    """Quantity is accepted for compatibility but always ignored."""

    model_config = {"json_schema_extra": {"examples": [{"name": "iPhone 11 Pro", "price": 999}]}}

    name: str = Field(..., max_length=255)
    price: float
    quantity: int | None = None


class ProductEntity(BaseModel):
    name: str = Field(..., max_length=255)
    price: float
    quantity: int = 0


class InsertProductsRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "entities": [
                        {"name": "Samsung Galaxy S10 Plus", "quantity": 10, "price": 704},
                        {"name": "Huawei P30 Pro", "quantity": 15, "price": 679},
                    ]
                }
            ]
        }
    }

    entities: list[ProductEntity] = Field(..., min_length=1)


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "iPhone 11 Pro Max", "price": 1099}]}}

    name: str | None = Field(None, max_length=255)
    quantity: int | None = None
    price: float | None = None


class QuantityChangeRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"value": 5}]}}

    value: int = Field(..., gt=0)


# --- Response Schemas ---


class ProductResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "name": "iPhone 11 Pro", "quantity": 25, "price": 999}
            ]
        }
    }

    id: str = Field(..., serialization_alias="_id")
    name: str
    quantity: int
    price: float

    @classmethod
    def from_view(cls, view: dict) -> ProductResponse:
        return cls(id=view["_id"], name=view["name"], quantity=view["quantity"], price=view["price"])


class ProductListResponse(BaseModel):
    rows: list[ProductResponse]
    total: int
    page: int
    page_size: int = Field(..., serialization_alias="pageSize")
    total_pages: int = Field(..., serialization_alias="totalPages")


class CountResponse(BaseModel):
    count: int


class ProductChangeResponse(BaseModel):
    change_type: str
    name: str
    quantity: int
    price: float | None = None
    quantity_change: int
    occurred_at: str
