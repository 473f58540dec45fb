"""Subscription paused template."""

from notifications.notification.notification import NotificationType
from notifications.templates.formatting import item_lines, money


class SubscriptionPausedTemplate:
    notification_type = NotificationType.SUBSCRIPTION_PAUSED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Your subscription is paused",
            "body": (
                f"Hi {context.get('customerName', 'there')},\n\n"
                f"Your {context.get('frequency', '')} subscription ({context.get('scheduleSummary', '')}) "
                "is paused. No deliveries will be made until you resume it.\n\n"
                f"{item_lines(context.get('items'))}\n\n"
                f"Per delivery: {money(context.get('totalAmount'))}"
            ),
        }
