"""Order cancelled template."""

from notifications.notification.notification import NotificationType
from notifications.templates.formatting import item_lines, money


class OrderCancelledTemplate:
    notification_type = NotificationType.ORDER_CANCELLED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_number = context.get("orderNumber", "N/A")
        return {
            "subject": f"Order {order_number} cancelled",
            "body": (
                f"Hi {context.get('customerName', 'there')},\n\n"
                f"Your order {order_number} has been cancelled.\n\n"
                f"{item_lines(context.get('items'))}\n\n"
                f"Total: {money(context.get('totalAmount'))}\n\n"
                "If this is unexpected, just reply to this email."
            ),
        }
