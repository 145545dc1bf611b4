"""Order creation: the guest checkout workflow.

Validate every line against current stock, snapshot prices, withdraw stock
and add the order, all inside the handler's unit of work. Nothing is mutated
until every line has been checked.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from catalogue.product.product import Product, find_product
from ordering.order.order import Order
from shared.domain import inventory
from shared.utils.logging import get_logger

logger = get_logger(__name__)


class ProductNotFound(ValidationError):
    """An order line references a product that does not exist."""


class InsufficientStock(ValidationError):
    """An order line asks for more units than are in stock."""


@inventory.command(part_of="Order")
class PlaceOrder:
    guest_name: String(required=True, max_length=100)
    guest_email: String(required=True, max_length=100)
    items: Text(required=True)  # JSON: list of {"product_id", "quantity"} dicts


def _quantity(value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


@inventory.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        """Place a guest order and withdraw its stock.

        Raises ``ProductNotFound`` when any line names an unknown product,
        otherwise ``InsufficientStock`` when any line asks for more than is in
        stock, otherwise ``ValidationError`` for bad quantities. Messages for
        every failing line are reported together, keyed by ``items[<index>]``.
        """
        lines = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not lines:
            raise ValidationError({"items": ["At least one order item is required."]})

        errors: dict[str, list[str]] = {}
        products: dict[str, Product] = {}
        requested: dict[str, int] = {}
        accepted: list[tuple[Product, int]] = []
        missing_product = False
        short_stock = False

        for index, line in enumerate(lines):
            field = f"items[{index}]"
            product_id = str(line.get("product_id") or "")
            quantity = _quantity(line.get("quantity"))

            if quantity is None:
                errors.setdefault(field, []).append("Quantity must be greater than 0.")
                continue

            product = products.get(product_id) or (find_product(product_id) if product_id else None)
            if product is None:
                errors.setdefault(field, []).append(f"Product with ID {product_id} not found.")
                missing_product = True
                continue
            products[product_id] = product

            # Several lines for one product draw on the same stock
            requested[product_id] = requested.get(product_id, 0) + quantity
            if not product.has_stock_for(requested[product_id]):
                errors.setdefault(field, []).append(
                    f"Insufficient stock for product {product.name}. "
                    f"Available: {product.quantity_in_stock}, Requested: {requested[product_id]}"
                )
                short_stock = True
            accepted.append((product, quantity))

        if errors:
            logger.warning("order_rejected", guest_email=command.guest_email, errors=errors)
            if missing_product:
                raise ProductNotFound(errors)
            if short_stock:
                raise InsufficientStock(errors)
            raise ValidationError(errors)

        order = Order.place(guest_name=command.guest_name, guest_email=command.guest_email, lines=accepted)

        product_repo = current_domain.repository_for(Product)
        for product_id, quantity in requested.items():
            products[product_id].withdraw(quantity)
            product_repo.add(products[product_id])

        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_created",
            order_id=order.id,
            line_count=len(order.items),
            total_amount=str(order.total()),
        )
        return str(order.id)
