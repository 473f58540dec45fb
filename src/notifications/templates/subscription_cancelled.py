"""Subscription cancelled template."""

from notifications.notification.notification import NotificationType
from notifications.templates.formatting import item_lines


class SubscriptionCancelledTemplate:
    notification_type = NotificationType.SUBSCRIPTION_CANCELLED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Your subscription has been cancelled",
            "body": (
                f"Hi {context.get('customerName', 'there')},\n\n"
                f"Your {context.get('frequency', '')} subscription ({context.get('scheduleSummary', '')}) "
                "has been cancelled. No further deliveries are scheduled.\n\n"
                f"{item_lines(context.get('items'))}\n\n"
                "We hope to see you again soon."
            ),
        }
