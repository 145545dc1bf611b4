"""Order cancellation template: sent when an order is cancelled or removed."""


class OrderCancellationTemplate:
    name = "order_cancellation"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        guest_name = context.get("guest_name", "customer")
        total_amount = context.get("total_amount", "0.00")
        return {
            "subject": f"Order #{order_id} Cancelled",
            "body": (
                f"Hello {guest_name},\n\n"
                f"Your order #{order_id} (total {total_amount}) has been cancelled.\n\n"
                "If you did not request this, please contact our support team."
            ),
        }
