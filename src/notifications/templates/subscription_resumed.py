"""Subscription resumed template."""

from notifications.notification.notification import NotificationType
from notifications.templates.formatting import item_lines, money


class SubscriptionResumedTemplate:
    notification_type = NotificationType.SUBSCRIPTION_RESUMED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Your subscription is active again",
            "body": (
                f"Hi {context.get('customerName', 'there')},\n\n"
                f"Your {context.get('frequency', '')} subscription ({context.get('scheduleSummary', '')}) "
                "is active again.\n"
                f"Next delivery: {context.get('nextDeliveryDate', 'N/A')}\n\n"
                f"{item_lines(context.get('items'))}\n\n"
                f"Per delivery: {money(context.get('totalAmount'))}"
            ),
        }
