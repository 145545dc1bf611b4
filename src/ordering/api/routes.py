"""FastAPI routes for the Ordering domain: guest checkout, tracking and order administration."""

import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from notifications.dispatch import send_low_stock_alerts, send_order_cancellation, send_order_confirmation
from ordering.api.schemas import (
    CancelOrderRequest,
    OrderPlacedResponse,
    OrderResponse,
    OrderSearchResponse,
    PlaceOrderRequest,
    StatusResponse,
    TrackByEmailRequest,
    TrackedOrderResponse,
    UpdateOrderRequest,
)
from ordering.order.cancellation import CancelGuestOrder, DeleteOrder
from ordering.order.creation import PlaceOrder
from ordering.order.lookup import (
    get_order_by_id,
    get_orders_by_guest_email,
    list_orders,
    products_pushed_to_low_stock,
)
from ordering.order.management import UpdateOrder
from shared.access import Actor
from shared.config import get_settings
from shared.email import normalize_email
from shared.web import admin_actor, is_programmatic, rejection_redirect

order_router = APIRouter(prefix="/orders", tags=["orders"])


# ---------------------------------------------------------------------------
# Guest endpoints
# ---------------------------------------------------------------------------
@order_router.post("", status_code=201, response_model=OrderPlacedResponse)
async def place_order(request: Request, body: PlaceOrderRequest):
    """Programmatic callers get JSON either way; browsers are redirected on success and on rejection."""
    try:
        command = PlaceOrder(
            guest_name=body.guest_name,
            guest_email=body.guest_email,
            items=json.dumps([line.model_dump() for line in body.items]),
        )
        order_id = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        if is_programmatic(request):
            raise
        return rejection_redirect(request, exc)

    detail = get_order_by_id(order_id)

    # Sent after commit; dispatch never raises
    send_order_confirmation(detail)
    settings = get_settings()
    if settings.low_stock_alerts:
        send_low_stock_alerts(products_pushed_to_low_stock(detail), settings.admin_email)

    if not is_programmatic(request):
        return RedirectResponse(url=f"/orders/{order_id}/track", status_code=303)

    response = OrderPlacedResponse(
        order_id=order_id,
        total_amount=detail.order.total(),
        order=OrderResponse.from_detail(detail),
    )
    return JSONResponse(status_code=201, content=response.model_dump(mode="json"))


@order_router.get("/{order_id}/track", response_model=TrackedOrderResponse)
async def track_order(order_id: str) -> TrackedOrderResponse:
    return TrackedOrderResponse.from_detail(get_order_by_id(order_id))


@order_router.post("/track-by-email", response_model=OrderSearchResponse)
async def track_by_email(body: TrackByEmailRequest) -> OrderSearchResponse:
    if not normalize_email(body.email):
        raise ValidationError({"email": ["Please enter your email address."]})

    orders = [OrderResponse.from_detail(detail) for detail in get_orders_by_guest_email(body.email)]
    if not orders:
        return OrderSearchResponse(success=False, message="No orders found for this email address.")
    return OrderSearchResponse(success=True, message=f"{len(orders)} order(s) found.", orders=orders)


@order_router.post("/{order_id}/cancel", response_model=StatusResponse)
async def cancel_order(order_id: str, body: CancelOrderRequest) -> StatusResponse:
    command = CancelGuestOrder(order_id=order_id, guest_email=body.guest_email)
    detail = current_domain.process(command, asynchronous=False)

    send_order_cancellation(detail)
    return StatusResponse(message="Order deleted successfully.")


# ---------------------------------------------------------------------------
# Admin endpoints
# ---------------------------------------------------------------------------
@order_router.get("", response_model=list[OrderResponse])
async def get_orders(actor: Actor = Depends(admin_actor)) -> list[OrderResponse]:
    return [OrderResponse.from_detail(detail) for detail in list_orders()]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, actor: Actor = Depends(admin_actor)) -> OrderResponse:
    return OrderResponse.from_detail(get_order_by_id(order_id))


@order_router.put("/{order_id}", response_model=OrderResponse)
async def edit_order(
    order_id: str,
    body: UpdateOrderRequest,
    actor: Actor = Depends(admin_actor),
) -> OrderResponse:
    command = UpdateOrder(
        order_id=order_id,
        guest_name=body.guest_name,
        guest_email=body.guest_email,
        expected_version=body.expected_version,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_detail(get_order_by_id(order_id))


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def remove_order(order_id: str, actor: Actor = Depends(admin_actor)) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse(message="Order deleted successfully.")
