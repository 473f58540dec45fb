"""Inbound cross-domain event handlers — Notifications reacts to Ordering events.

Order events (confirmation requests, deliveries, cancellations) arrive on the
``ordering::order`` stream; subscription changes on ``ordering::subscription``.
Each one becomes a customer email. New orders also produce a business copy
for the store's inbox.
"""

import json

import structlog
from notifications.domain import notifications
from notifications.notification.helpers import already_notified, business_notification_email, create_notification
from notifications.notification.notification import Notification, NotificationType, RecipientType
from protean.utils.mixins import handle
from shared.events.ordering import (
    OrderCancelled,
    OrderConfirmationRequested,
    OrderDelivered,
    SubscriptionCancelled,
    SubscriptionPaused,
    SubscriptionResumed,
)

logger = structlog.get_logger(__name__)

notifications.register_external_event(OrderConfirmationRequested, "Ordering.OrderConfirmationRequested.v1")
notifications.register_external_event(OrderDelivered, "Ordering.OrderDelivered.v1")
notifications.register_external_event(OrderCancelled, "Ordering.OrderCancelled.v1")
notifications.register_external_event(SubscriptionPaused, "Ordering.SubscriptionPaused.v1")
notifications.register_external_event(SubscriptionResumed, "Ordering.SubscriptionResumed.v1")
notifications.register_external_event(SubscriptionCancelled, "Ordering.SubscriptionCancelled.v1")


def _items(raw) -> list[dict]:
    return json.loads(raw) if isinstance(raw, str) and raw else list(raw or [])


def order_confirmation_payload(event: OrderConfirmationRequested) -> dict:
    """The order snapshot in the shape the confirmation email expects."""
    return {
        "orderNumber": event.order_number,
        "customerName": event.customer_name,
        "customerEmail": event.customer_email or "",
        "customerPhone": event.customer_phone or "",
        "deliveryAddress": event.delivery_address or "",
        "items": _items(event.items),
        "totalAmount": event.total_amount,
        "paymentMethod": event.payment_method,
        "deliveryType": event.delivery_type,
    }


def _subscription_context(event, **extra) -> dict:
    return {
        "subscriptionId": str(event.subscription_id),
        "customerName": event.customer_name,
        "frequency": event.frequency_label or event.frequency,
        "scheduleSummary": event.schedule_summary or "",
        "deliveryType": event.delivery_type,
        "items": _items(event.items),
        "totalAmount": event.total_amount,
        **extra,
    }


@notifications.event_handler(part_of=Notification, stream_category="ordering::order")
class OrderingEventsHandler:
    """Reacts to Ordering order events to send customer and business emails."""

    @handle(OrderConfirmationRequested)
    def on_confirmation_requested(self, event: OrderConfirmationRequested) -> None:
        """Send the order confirmation and the business copy, each at most once.

        The stream may redeliver the request, so existing notifications for the
        order number are checked right before anything is created.
        """
        context = order_confirmation_payload(event)
        recipients = (
            (NotificationType.ORDER_CONFIRMED.value, event.customer_email, RecipientType.CUSTOMER.value),
            (NotificationType.NEW_ORDER_ALERT.value, business_notification_email(), RecipientType.BUSINESS.value),
        )

        for notification_type, recipient, recipient_type in recipients:
            if already_notified(notification_type, event.order_number):
                logger.info(
                    "Duplicate confirmation request ignored",
                    notification_type=notification_type,
                    order_number=event.order_number,
                )
                continue

            create_notification(
                recipient=recipient,
                notification_type=notification_type,
                context=context,
                recipient_type=recipient_type,
                source_event_type="Ordering.OrderConfirmationRequested.v1",
                source_ref=event.order_number,
            )

    @handle(OrderDelivered)
    def on_order_delivered(self, event: OrderDelivered) -> None:
        create_notification(
            recipient=event.customer_email,
            notification_type=NotificationType.ORDER_DELIVERED.value,
            context={
                "orderNumber": event.order_number,
                "customerName": event.customer_name,
                "deliveryAddress": event.delivery_address or "",
                "deliveryType": event.delivery_type,
                "items": _items(event.items),
                "totalAmount": event.total_amount,
            },
            source_event_type="Ordering.OrderDelivered.v1",
            source_ref=event.order_number,
        )

    @handle(OrderCancelled)
    def on_order_cancelled(self, event: OrderCancelled) -> None:
        create_notification(
            recipient=event.customer_email,
            notification_type=NotificationType.ORDER_CANCELLED.value,
            context={
                "orderNumber": event.order_number,
                "customerName": event.customer_name,
                "items": _items(event.items),
                "totalAmount": event.total_amount,
                "previousStatus": event.previous_status,
            },
            source_event_type="Ordering.OrderCancelled.v1",
            source_ref=event.order_number,
        )


@notifications.event_handler(part_of=Notification, stream_category="ordering::subscription")
class SubscriptionEventsHandler:
    """Reacts to subscription lifecycle changes with a customer email."""

    @handle(SubscriptionPaused)
    def on_subscription_paused(self, event: SubscriptionPaused) -> None:
        create_notification(
            recipient=event.customer_email,
            notification_type=NotificationType.SUBSCRIPTION_PAUSED.value,
            context=_subscription_context(event),
            source_event_type="Ordering.SubscriptionPaused.v1",
            source_ref=str(event.subscription_id),
        )

    @handle(SubscriptionResumed)
    def on_subscription_resumed(self, event: SubscriptionResumed) -> None:
        create_notification(
            recipient=event.customer_email,
            notification_type=NotificationType.SUBSCRIPTION_RESUMED.value,
            context=_subscription_context(event, nextDeliveryDate=str(event.next_delivery_date)),
            source_event_type="Ordering.SubscriptionResumed.v1",
            source_ref=str(event.subscription_id),
        )

    @handle(SubscriptionCancelled)
    def on_subscription_cancelled(self, event: SubscriptionCancelled) -> None:
        create_notification(
            recipient=event.customer_email,
            notification_type=NotificationType.SUBSCRIPTION_CANCELLED.value,
            context=_subscription_context(event),
            source_event_type="Ordering.SubscriptionCancelled.v1",
            source_ref=str(event.subscription_id),
        )
