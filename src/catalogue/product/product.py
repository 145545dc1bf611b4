"""Product aggregate: a stocked item with a price, a stock level and a low-stock threshold."""

from datetime import UTC, datetime
from decimal import Decimal

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from shared.domain import inventory
from shared.money import to_money


def _now():
    return datetime.now(UTC)


def _price(value) -> float:
    try:
        return float(to_money(value))
    except ValueError:
        raise ValidationError({"price": ["Price must be a number"]}) from None


@inventory.aggregate
class Product:
    """A catalogue item that can be ordered while stock lasts.

    Prices are stored rounded to cents and read back as Decimal through
    ``unit_price``. Every save bumps ``_version``; saving a copy loaded before
    someone else's save fails instead of overwriting their change.
    """

    name: String(required=True, max_length=100)
    description: String(max_length=1000)
    price: Float(required=True, min_value=0.01)
    quantity_in_stock: Integer(default=0, min_value=0)
    low_stock_threshold: Integer(default=0, min_value=0)
    category_id: Identifier(required=True)
    created_at: DateTime(default=_now)
    updated_at: DateTime(default=_now)

    @classmethod
    def create(
        cls,
        name,
        price,
        category_id,
        quantity_in_stock=0,
        low_stock_threshold=0,
        description=None,
    ):
        now = _now()
        return cls(
            name=name.strip() if name else name,
            description=description,
            price=_price(price),
            quantity_in_stock=quantity_in_stock,
            low_stock_threshold=low_stock_threshold,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )

    def update_details(
        self,
        name,
        price,
        category_id,
        quantity_in_stock,
        low_stock_threshold,
        description=None,
    ):
        self.name = name.strip() if name else name
        self.description = description
        self.price = _price(price)
        self.quantity_in_stock = quantity_in_stock
        self.low_stock_threshold = low_stock_threshold
        self.category_id = category_id
        self.updated_at = _now()

    def unit_price(self) -> Decimal:
        return to_money(self.price)

    def is_low_stock(self) -> bool:
        return self.quantity_in_stock <= self.low_stock_threshold

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.quantity_in_stock

    def withdraw(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than 0."]})
        if not self.has_stock_for(quantity):
            raise ValidationError(
                {"quantity": [f"Insufficient stock for product {self.name}. Available: {self.quantity_in_stock}"]}
            )
        self.quantity_in_stock -= quantity
        self.updated_at = _now()

    def restock(self, quantity: int) -> None:
        """Return ``quantity`` units to stock."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than 0."]})
        self.quantity_in_stock += quantity
        self.updated_at = _now()


def load_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError({"product_id": [f"Product with ID {product_id} not found."]}) from None


def find_product(product_id) -> Product | None:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None


def all_products() -> list[Product]:
    return current_domain.repository_for(Product)._dao.query.all().items


def products_in_category(category_id) -> list[Product]:
    products = current_domain.repository_for(Product)._dao.query.filter(category_id=category_id).all().items
    return sorted(products, key=lambda product: (product.name.lower(), product.id))


def count_products() -> int:
    return len(all_products())
