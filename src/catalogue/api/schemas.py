"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

# --- Category Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Electronics",
                    "description": "Electronic devices and accessories",
                }
            ]
        }
    }

    name: str
    description: str | None = None


class UpdateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Office Supplies",
                    "description": "Paper, pens and everything for the desk",
                }
            ]
        }
    }

    name: str
    description: str | None = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(
            id=str(category.id),
            name=category.name,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


# --- Product Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptop",
                    "description": "High-performance laptop",
                    "price": "999.99",
                    "quantity_in_stock": 15,
                    "low_stock_threshold": 5,
                    "category_id": "3f1c9a52-6d0e-4b57-9a43-2f0d7c1e8b21",
                }
            ]
        }
    }

    name: str
    description: str | None = None
    price: Decimal
    quantity_in_stock: int = 0
    low_stock_threshold: int = 0
    category_id: str


class UpdateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptop",
                    "description": "High-performance laptop, 2nd generation",
                    "price": "949.00",
                    "quantity_in_stock": 12,
                    "low_stock_threshold": 5,
                    "category_id": "3f1c9a52-6d0e-4b57-9a43-2f0d7c1e8b21",
                    "expected_version": 0,
                }
            ]
        }
    }

    name: str
    description: str | None = None
    price: Decimal
    quantity_in_stock: int
    low_stock_threshold: int
    category_id: str
    expected_version: int | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: Decimal
    quantity_in_stock: int
    low_stock_threshold: int
    is_low_stock: bool
    category_id: str
    category_name: str | None = None
    version: int

    @classmethod
    def from_listing(cls, product, category=None) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.unit_price(),
            quantity_in_stock=product.quantity_in_stock,
            low_stock_threshold=product.low_stock_threshold,
            is_low_stock=product.is_low_stock(),
            category_id=str(product.category_id),
            category_name=category.name if category is not None else None,
            version=product._version,
        )


class CategoryDetailResponse(CategoryResponse):
    products: list[ProductResponse] = []


class ProductSearchResponse(BaseModel):
    success: bool = True
    message: str = ""
    products: list[ProductResponse] = []


class DeletedResponse(BaseModel):
    success: bool = True
    message: str
