"""Low stock alert template: internal notification to operations."""


class LowStockAlertTemplate:
    name = "low_stock_alert"

    @staticmethod
    def render(context: dict) -> dict:
        product_name = context.get("product_name", "N/A")
        product_id = context.get("product_id", "N/A")
        quantity_in_stock = context.get("quantity_in_stock", 0)
        low_stock_threshold = context.get("low_stock_threshold", 0)
        return {
            "subject": f"[Low Stock] {product_name}",
            "body": (
                f"Low stock alert for {product_name}\n\n"
                f"Product ID: {product_id}\n"
                f"In Stock: {quantity_in_stock}\n"
                f"Low Stock Threshold: {low_stock_threshold}\n\n"
                "Please review and reorder as needed."
            ),
        }
