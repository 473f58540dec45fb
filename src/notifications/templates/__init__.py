"""Template registry — maps NotificationType to template classes.

Each template renders a subject and a plain-text body from the event's
context data.
"""

from notifications.notification.notification import NotificationType
from notifications.templates.new_order_alert import NewOrderAlertTemplate
from notifications.templates.order_cancelled import OrderCancelledTemplate
from notifications.templates.order_confirmed import OrderConfirmedTemplate
from notifications.templates.order_delivered import OrderDeliveredTemplate
from notifications.templates.subscription_cancelled import SubscriptionCancelledTemplate
from notifications.templates.subscription_paused import SubscriptionPausedTemplate
from notifications.templates.subscription_resumed import SubscriptionResumedTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.ORDER_CONFIRMED.value: OrderConfirmedTemplate,
    NotificationType.NEW_ORDER_ALERT.value: NewOrderAlertTemplate,
    NotificationType.ORDER_DELIVERED.value: OrderDeliveredTemplate,
    NotificationType.ORDER_CANCELLED.value: OrderCancelledTemplate,
    NotificationType.SUBSCRIPTION_PAUSED.value: SubscriptionPausedTemplate,
    NotificationType.SUBSCRIPTION_RESUMED.value: SubscriptionResumedTemplate,
    NotificationType.SUBSCRIPTION_CANCELLED.value: SubscriptionCancelledTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
