"""New order alert — business copy of every new order."""

from notifications.notification.notification import NotificationType
from notifications.templates.formatting import delivery_line, item_lines, money


class NewOrderAlertTemplate:
    notification_type = NotificationType.NEW_ORDER_ALERT.value

    @staticmethod
    def render(context: dict) -> dict:
        order_number = context.get("orderNumber", "N/A")
        return {
            "subject": f"New order {order_number} from {context.get('customerName', 'N/A')}",
            "body": (
                f"Order: {order_number}\n"
                f"Customer: {context.get('customerName', 'N/A')}\n"
                f"Phone: {context.get('customerPhone') or 'N/A'}\n"
                f"Email: {context.get('customerEmail') or 'N/A'}\n"
                f"{delivery_line(context)}\n\n"
                f"{item_lines(context.get('items'))}\n\n"
                f"Total: {money(context.get('totalAmount'))} ({context.get('paymentMethod', 'cash')})"
            ),
        }
