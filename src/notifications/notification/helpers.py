"""Shared helpers for notification event handlers.

Provides the common pattern: render template → create Notification.
"""

import json
import os

import structlog
from notifications.notification.notification import Notification, RecipientType
from notifications.templates import get_template
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)


def business_notification_email() -> str | None:
    """Address that receives the business copy of new orders, if configured."""
    return os.environ.get("BUSINESS_NOTIFICATION_EMAIL") or None


def already_notified(notification_type: str, source_ref: str | None) -> bool:
    """Whether a ``notification_type`` email already exists for ``source_ref``."""
    if not source_ref:
        return False
    repo = current_domain.repository_for(Notification)
    existing = repo._dao.query.filter(notification_type=notification_type, source_ref=source_ref).all().items
    return bool(existing)


def create_notification(
    recipient: str | None,
    notification_type: str,
    context: dict,
    recipient_type: str = RecipientType.CUSTOMER.value,
    source_event_type: str | None = None,
    source_ref: str | None = None,
) -> str | None:
    """Render ``notification_type`` and queue it for ``recipient``.

    An empty recipient is not an error: there is simply nobody to email.

    Returns:
        The notification ID, or None when skipped.
    """
    if not recipient or not recipient.strip():
        logger.info(
            "Notification skipped, no recipient email",
            notification_type=notification_type,
            source_ref=source_ref,
        )
        return None

    template_cls = get_template(notification_type)
    rendered = template_cls.render(context)

    notification = Notification.create(
        recipient=recipient.strip(),
        notification_type=notification_type,
        subject=rendered.get("subject"),
        body=rendered["body"],
        recipient_type=recipient_type,
        source_event_type=source_event_type,
        source_ref=source_ref,
        context_data=json.dumps(context, default=str),
    )
    current_domain.repository_for(Notification).add(notification)

    logger.info(
        "Notification created",
        notification_id=str(notification.id),
        notification_type=notification_type,
        recipient_type=recipient_type,
        source_ref=source_ref,
    )
    return str(notification.id)
