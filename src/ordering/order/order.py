"""Order aggregate: a guest's order and the line items it owns.

Prices are locked when the order is placed: each ``OrderItem.unit_price`` is a
snapshot of the product price at that moment, and ``total_amount`` is the sum
of the line subtotals computed then. Neither is re-derived later.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from shared.domain import inventory
from shared.email import is_valid_email
from shared.money import to_money


def as_utc(moment: datetime | None) -> datetime | None:
    """Attach UTC to timestamps read back from backends that drop the zone."""
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


@inventory.entity(part_of="Order")
class OrderItem:
    """A line on an order: a product, a quantity and the unit price paid."""

    line_number: Integer(required=True, min_value=1)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.01)

    def price_paid(self) -> Decimal:
        return to_money(self.unit_price)

    def subtotal(self) -> Decimal:
        return to_money(self.price_paid() * self.quantity)


@inventory.aggregate
class Order:
    """An order placed by a guest, identified by name and email."""

    guest_name: String(required=True, max_length=100)
    guest_email: String(required=True, max_length=100)
    order_date: DateTime(required=True)
    total_amount: Float(required=True, min_value=0.01)
    items: HasMany(OrderItem)

    @invariant.post
    def guest_email_must_be_well_formed(self):
        if self.guest_email and not is_valid_email(self.guest_email):
            raise ValidationError({"guest_email": [f"{self.guest_email} is not a valid email address."]})

    @classmethod
    def place(cls, guest_name, guest_email, lines):
        """Build a new order from ``(product, quantity)`` pairs.

        Lines naming the same product are merged into one item. Each item
        snapshots the product's current price. Stock is not touched here; the
        caller withdraws it in the same unit of work.
        """
        if not lines:
            raise ValidationError({"items": ["At least one order item is required."]})

        products = {}
        quantities: dict[str, int] = {}
        for product, quantity in lines:
            products[product.id] = product
            quantities[product.id] = quantities.get(product.id, 0) + quantity

        items = [
            OrderItem(
                line_number=position,
                product_id=product_id,
                quantity=quantity,
                unit_price=float(products[product_id].unit_price()),
            )
            for position, (product_id, quantity) in enumerate(quantities.items(), start=1)
        ]
        total = sum((item.subtotal() for item in items), Decimal("0.00"))

        order = cls(
            guest_name=guest_name.strip() if guest_name else guest_name,
            guest_email=guest_email.strip() if guest_email else guest_email,
            order_date=datetime.now(UTC),
            total_amount=float(to_money(total)),
        )
        for item in items:
            order.add_items(item)
        return order

    def update_guest_details(self, guest_name, guest_email):
        with atomic_change(self):
            self.guest_name = guest_name.strip() if guest_name else guest_name
            self.guest_email = guest_email.strip() if guest_email else guest_email

    def clear_items(self):
        """Detach every item so the next save deletes them."""
        for item in list(self.items):
            self.remove_items(item)

    def total(self) -> Decimal:
        return to_money(self.total_amount)

    def placed_at(self) -> datetime:
        return as_utc(self.order_date)

    def sorted_items(self) -> list[OrderItem]:
        return sorted(self.items, key=lambda item: item.line_number)
