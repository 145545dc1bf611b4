"""Order confirmation template: sent when a guest order is placed."""


class OrderConfirmationTemplate:
    name = "order_confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        guest_name = context.get("guest_name", "customer")
        total_amount = context.get("total_amount", "0.00")
        lines = context.get("lines", [])
        line_text = "\n".join(
            f"  - {line['product_name']} x {line['quantity']} @ {line['unit_price']}" for line in lines
        )
        return {
            "subject": f"Order #{order_id} Confirmed",
            "body": (
                f"Hello {guest_name},\n\n"
                f"Your order #{order_id} has been placed.\n\n"
                f"{line_text}\n\n"
                f"Order Total: {total_amount}\n\n"
                "You can track this order with its number or your email address.\n\n"
                "Thank you for shopping with Smart Inventory!"
            ),
        }
