"""Dashboard overview: catalogue totals, low-stock products and recent orders."""

from dataclasses import dataclass, field

from catalogue.category.category import count_categories
from catalogue.product.product import count_products
from catalogue.product.search import ProductListing, low_stock_products
from ordering.order.lookup import OrderDetail, recent_orders

RECENT_ORDER_COUNT = 5


@dataclass
class Overview:
    total_products: int = 0
    total_categories: int = 0
    low_stock_products: list[ProductListing] = field(default_factory=list)
    recent_orders: list[OrderDetail] = field(default_factory=list)


def build_overview() -> Overview:
    return Overview(
        total_products=count_products(),
        total_categories=count_categories(),
        low_stock_products=low_stock_products(),
        recent_orders=recent_orders(limit=RECENT_ORDER_COUNT),
    )
