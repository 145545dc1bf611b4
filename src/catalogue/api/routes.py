"""FastAPI endpoints for the Catalogue domain."""

from decimal import Decimal

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CategoryDetailResponse,
    CategoryResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    DeletedResponse,
    ProductResponse,
    ProductSearchResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from catalogue.category.category import list_categories, load_category
from catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from catalogue.product.management import CreateProduct, DeleteProduct, UpdateProduct
from catalogue.product.product import products_in_category
from catalogue.product.search import ProductSearch, get_product_listing, search_products
from shared.access import Actor
from shared.web import admin_actor

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


def product_filters(
    name: str | None = None,
    category_id: str | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
    low_stock: bool = False,
) -> ProductSearch:
    return ProductSearch(
        name=name,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        low_stock_only=low_stock,
    )


def _product_response(product_id) -> ProductResponse:
    product, category = get_product_listing(product_id)
    return ProductResponse.from_listing(product, category)


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(filters: ProductSearch = Depends(product_filters)) -> list[ProductResponse]:
    return [ProductResponse.from_listing(product, category) for product, category in search_products(filters)]


@product_router.get("/search", response_model=ProductSearchResponse)
async def search(filters: ProductSearch = Depends(product_filters)) -> ProductSearchResponse:
    products = [ProductResponse.from_listing(product, category) for product, category in search_products(filters)]
    return ProductSearchResponse(message=f"{len(products)} product(s) found.", products=products)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(product_id)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: CreateProductRequest, actor: Actor = Depends(admin_actor)) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        quantity_in_stock=body.quantity_in_stock,
        low_stock_threshold=body.low_stock_threshold,
        category_id=body.category_id,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(product_id)


@product_router.put("/{product_id}", response_model=ProductResponse)
async def edit_product(
    product_id: str,
    body: UpdateProductRequest,
    actor: Actor = Depends(admin_actor),
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        quantity_in_stock=body.quantity_in_stock,
        low_stock_threshold=body.low_stock_threshold,
        category_id=body.category_id,
        expected_version=body.expected_version,
    )
    current_domain.process(command, asynchronous=False)
    return _product_response(product_id)


@product_router.delete("/{product_id}", response_model=DeletedResponse)
async def remove_product(product_id: str, actor: Actor = Depends(admin_actor)) -> DeletedResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return DeletedResponse(message="Product deleted successfully.")


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in list_categories()]


@category_router.get("/{category_id}", response_model=CategoryDetailResponse)
async def get_category(category_id: str) -> CategoryDetailResponse:
    category = load_category(category_id)
    return CategoryDetailResponse(
        **CategoryResponse.from_category(category).model_dump(),
        products=[ProductResponse.from_listing(product, category) for product in products_in_category(category.id)],
    )


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def add_category(body: CreateCategoryRequest, actor: Actor = Depends(admin_actor)) -> CategoryResponse:
    command = CreateCategory(name=body.name, description=body.description)
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def edit_category(
    category_id: str,
    body: UpdateCategoryRequest,
    actor: Actor = Depends(admin_actor),
) -> CategoryResponse:
    command = UpdateCategory(category_id=category_id, name=body.name, description=body.description)
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(load_category(category_id))


@category_router.delete("/{category_id}", response_model=DeletedResponse)
async def remove_category(category_id: str, actor: Actor = Depends(admin_actor)) -> DeletedResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return DeletedResponse(message="Category deleted successfully.")
