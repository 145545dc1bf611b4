"""Pydantic request/response schemas for the Ordering API.

These are the external contracts; the handlers in ``ordering.order`` take
their own protean commands.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "guest_name": "Ada Lovelace",
                    "guest_email": "ada@example.com",
                    "items": [
                        {"product_id": "8d2f6c1e-4a7b-4e0c-b1d9-5f3a2e6c7b10", "quantity": 2},
                        {"product_id": "c54e0b7a-92f1-4d6e-8a3c-1b7e9d2f4a66", "quantity": 1},
                    ],
                }
            ]
        }
    }

    guest_name: str | None = None
    guest_email: str | None = None
    items: list[OrderLineSchema] = []


class TrackByEmailRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "ada@example.com"}]}}

    email: str | None = None


class CancelOrderRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"guest_email": "ada@example.com"}]}}

    guest_email: str


class UpdateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "guest_name": "Ada King",
                    "guest_email": "ada.king@example.com",
                    "expected_version": 0,
                }
            ]
        }
    }

    guest_name: str | None = None
    guest_email: str | None = None
    expected_version: int | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: str | None = None
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class TrackedOrderResponse(BaseModel):
    """Public view of an order by id. Omits the guest email, which authorizes cancellation."""

    id: str
    guest_name: str
    order_date: datetime
    total_amount: Decimal
    items: list[OrderItemResponse] = []

    @classmethod
    def from_detail(cls, detail) -> TrackedOrderResponse:
        order = detail.order
        values = {
            "id": str(order.id),
            "guest_name": order.guest_name,
            "guest_email": order.guest_email,
            "order_date": order.placed_at(),
            "total_amount": order.total(),
            "version": order._version,
            "items": [
                OrderItemResponse(
                    id=str(line.item.id),
                    product_id=str(line.item.product_id),
                    product_name=line.product.name if line.product else None,
                    quantity=line.item.quantity,
                    unit_price=line.item.price_paid(),
                    subtotal=line.item.subtotal(),
                )
                for line in detail.lines
            ],
        }
        return cls(**{name: value for name, value in values.items() if name in cls.model_fields})


class OrderResponse(TrackedOrderResponse):
    """Full order view for the guest who supplied the email and for administrators."""

    guest_email: str
    version: int


class OrderPlacedResponse(BaseModel):
    success: bool = True
    message: str = "Order created successfully!"
    order_id: str
    total_amount: Decimal
    order: OrderResponse


class OrderSearchResponse(BaseModel):
    success: bool
    message: str
    orders: list[OrderResponse] = []


class StatusResponse(BaseModel):
    success: bool = True
    message: str
