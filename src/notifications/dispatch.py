"""Email dispatch for order events.

Called by the HTTP layer after the unit of work has committed. Sending never
raises: a failed or crashing adapter is logged and reported as ``False`` so
the already-committed order is unaffected.
"""

from notifications.channel import get_email_adapter
from notifications.channel.email_port import EmailPort
from notifications.templates import get_template
from ordering.order.lookup import OrderDetail
from shared.utils.logging import get_logger

logger = get_logger(__name__)


def order_context(detail: OrderDetail) -> dict:
    order = detail.order
    return {
        "order_id": str(order.id),
        "guest_name": order.guest_name,
        "guest_email": order.guest_email,
        "total_amount": str(order.total()),
        "lines": [
            {
                "product_name": line.product.name if line.product else f"Product {line.item.product_id}",
                "quantity": line.item.quantity,
                "unit_price": str(line.item.price_paid()),
            }
            for line in detail.lines
        ],
    }


def _send(adapter: EmailPort, template_name: str, to: str, context: dict) -> bool:
    content = get_template(template_name).render(context)
    try:
        result = adapter.send(to=to, subject=content["subject"], body=content["body"])
    except Exception as exc:
        logger.error("email_dispatch_crashed", template=template_name, to=to, error=str(exc), exc_info=True)
        return False

    if result.get("status") != "sent":
        logger.error("email_dispatch_failed", template=template_name, to=to, error=result.get("error"))
        return False

    logger.info("email_dispatched", template=template_name, to=to, message_id=result.get("message_id"))
    return True


def send_order_confirmation(detail: OrderDetail, adapter: EmailPort | None = None) -> bool:
    adapter = adapter or get_email_adapter()
    return _send(adapter, "order_confirmation", detail.order.guest_email, order_context(detail))


def send_order_cancellation(detail: OrderDetail, adapter: EmailPort | None = None) -> bool:
    adapter = adapter or get_email_adapter()
    return _send(adapter, "order_cancellation", detail.order.guest_email, order_context(detail))


def send_low_stock_alerts(products, recipient: str | None, adapter: EmailPort | None = None) -> int:
    """Alert ``recipient`` about each product; returns how many alerts went out."""
    if not recipient or not products:
        return 0

    adapter = adapter or get_email_adapter()
    sent = 0
    for product in products:
        context = {
            "product_id": str(product.id),
            "product_name": product.name,
            "quantity_in_stock": product.quantity_in_stock,
            "low_stock_threshold": product.low_stock_threshold,
        }
        if _send(adapter, "low_stock_alert", recipient, context):
            sent += 1
    return sent
