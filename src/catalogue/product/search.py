"""Product search: filtered listings for the catalogue pages and the AJAX search."""

from decimal import Decimal
from typing import NamedTuple

from protean.exceptions import ValidationError
from pydantic import BaseModel

from catalogue.category.category import Category, list_categories, load_category
from catalogue.product.product import Product, all_products, load_product
from shared.utils.logging import get_logger

logger = get_logger(__name__)


class ProductListing(NamedTuple):
    product: Product
    category: Category | None


class ProductSearch(BaseModel):
    """Optional filters, combined with AND. Unset filters match everything."""

    name: str | None = None
    category_id: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    low_stock_only: bool = False

    def ensure_valid(self) -> None:
        errors: dict[str, list[str]] = {}
        if self.min_price is not None and self.min_price < 0:
            errors["min_price"] = ["Minimum price cannot be negative."]
        if self.max_price is not None and self.max_price < 0:
            errors["max_price"] = ["Maximum price cannot be negative."]
        if (
            not errors
            and self.min_price is not None
            and self.max_price is not None
            and self.max_price < self.min_price
        ):
            errors["max_price"] = ["Maximum price cannot be less than minimum price."]
        if errors:
            raise ValidationError(errors)

    def matches(self, product: Product) -> bool:
        if self.name and self.name.lower() not in product.name.lower():
            return False
        if self.category_id is not None and str(product.category_id) != str(self.category_id):
            return False
        if self.min_price is not None and product.unit_price() < self.min_price:
            return False
        if self.max_price is not None and product.unit_price() > self.max_price:
            return False
        return not self.low_stock_only or product.is_low_stock()


def search_products(filters: ProductSearch) -> list[ProductListing]:
    """Return products matching every supplied filter, each with its category, ordered by name."""
    filters.ensure_valid()

    categories = {str(category.id): category for category in list_categories()}
    products = sorted(
        (product for product in all_products() if filters.matches(product)),
        key=lambda product: (product.name.lower(), product.id),
    )

    listings = [ProductListing(product, categories.get(str(product.category_id))) for product in products]
    logger.debug("product_search", filters=filters.model_dump(exclude_defaults=True), results=len(listings))
    return listings


def low_stock_products() -> list[ProductListing]:
    return search_products(ProductSearch(low_stock_only=True))


def get_product_listing(product_id) -> ProductListing:
    product = load_product(product_id)
    return ProductListing(product, load_category(product.category_id))
