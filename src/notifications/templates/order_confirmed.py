"""Order confirmation template — sent to the customer when an order is placed."""

from notifications.notification.notification import NotificationType
from notifications.templates.formatting import delivery_line, item_lines, money


class OrderConfirmedTemplate:
    notification_type = NotificationType.ORDER_CONFIRMED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_number = context.get("orderNumber", "N/A")
        return {
            "subject": f"Order {order_number} received",
            "body": (
                f"Hi {context.get('customerName', 'there')},\n\n"
                f"Thank you for your order {order_number}.\n\n"
                f"{item_lines(context.get('items'))}\n\n"
                f"Total: {money(context.get('totalAmount'))}\n"
                f"Payment: {str(context.get('paymentMethod', 'cash')).capitalize()} on delivery\n"
                f"{delivery_line(context)}\n\n"
                "We'll be in touch if anything changes.\n\n"
                "BlueSpring Water"
            ),
        }
