"""Template registry: maps template names to template classes.

Each template renders a subject and body from a plain context dict.
"""

from notifications.templates.low_stock_alert import LowStockAlertTemplate
from notifications.templates.order_cancellation import OrderCancellationTemplate
from notifications.templates.order_confirmation import OrderConfirmationTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    OrderConfirmationTemplate.name: OrderConfirmationTemplate,
    OrderCancellationTemplate.name: OrderCancellationTemplate,
    LowStockAlertTemplate.name: LowStockAlertTemplate,
}


def get_template(name: str):
    """Look up a template class by name."""
    template_cls = TEMPLATE_REGISTRY.get(name)
    if template_cls is None:
        raise ValueError(f"No template registered for: {name}")
    return template_cls
