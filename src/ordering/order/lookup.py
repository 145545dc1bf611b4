"""Order lookup: guest tracking and admin listings.

Orders are returned as ``OrderDetail`` bundles: the order, and each of its
items next to the product it references. Products are loaded explicitly once
per call rather than through object navigation.
"""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.product.product import Product, find_product
from ordering.order.order import Order, OrderItem
from shared.email import normalize_email


@dataclass
class OrderLineDetail:
    item: OrderItem
    product: Product | None


@dataclass
class OrderDetail:
    order: Order
    lines: list[OrderLineDetail] = field(default_factory=list)


def _products_by_id(orders: list[Order]) -> dict[str, Product]:
    product_ids = {str(item.product_id) for order in orders for item in order.items}
    products = {}
    for product_id in product_ids:
        product = find_product(product_id)
        if product is not None:
            products[product_id] = product
    return products


def load_order_details(orders: list[Order]) -> list[OrderDetail]:
    products = _products_by_id(orders)
    return [
        OrderDetail(
            order=order,
            lines=[
                OrderLineDetail(item=item, product=products.get(str(item.product_id)))
                for item in order.sorted_items()
            ],
        )
        for order in orders
    ]


def load_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError({"order_id": [f"Order with ID {order_id} not found."]}) from None


def _newest_first(orders: list[Order]) -> list[Order]:
    return sorted(orders, key=lambda order: (order.placed_at(), str(order.id)), reverse=True)


def all_orders() -> list[Order]:
    return _newest_first(current_domain.repository_for(Order)._dao.query.all().items)


def get_order_by_id(order_id) -> OrderDetail:
    return load_order_details([load_order(order_id)])[0]


def get_orders_by_guest_email(email: str) -> list[OrderDetail]:
    """All orders placed under ``email``, newest first."""
    normalized = normalize_email(email)
    if not normalized:
        return []
    return load_order_details([order for order in all_orders() if normalize_email(order.guest_email) == normalized])


def list_orders() -> list[OrderDetail]:
    return load_order_details(all_orders())


def recent_orders(limit: int = 5) -> list[OrderDetail]:
    return load_order_details(all_orders()[:limit])


def order_lines_for_product(product_id) -> list[OrderItem]:
    return [item for order in all_orders() for item in order.items if str(item.product_id) == str(product_id)]


def products_pushed_to_low_stock(detail: OrderDetail) -> list[Product]:
    """Products on the order that were above their threshold before it and are low now."""
    crossed = []
    for line in detail.lines:
        product = line.product
        if product is None:
            continue
        stock_before = product.quantity_in_stock + line.item.quantity
        if product.is_low_stock() and stock_before > product.low_stock_threshold:
            crossed.append(product)
    return crossed
