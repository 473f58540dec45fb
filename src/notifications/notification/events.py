"""Domain events for the Notification aggregate."""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, Integer, String


@notifications.event(part_of="Notification")
class NotificationCreated:
    """An email was rendered and queued for dispatch."""

    __version__ = 1

    notification_id: Identifier(required=True)
    recipient: String(required=True)
    recipient_type: String(required=True)
    notification_type: String(required=True)
    subject: String()
    source_event_type: String()
    source_ref: String()
    created_at: DateTime(required=True)


@notifications.event(part_of="Notification")
class NotificationSent:
    __version__ = 1

    notification_id: Identifier(required=True)
    recipient: String(required=True)
    message_id: String()
    sent_at: DateTime(required=True)


@notifications.event(part_of="Notification")
class NotificationFailed:
    """The email channel rejected the message."""

    __version__ = 1

    notification_id: Identifier(required=True)
    recipient: String(required=True)
    reason: String(required=True)
    retry_count: Integer(required=True)
    max_retries: Integer(required=True)
    failed_at: DateTime(required=True)


@notifications.event(part_of="Notification")
class NotificationRetried:
    """A failed notification was queued again for dispatch."""

    __version__ = 1

    notification_id: Identifier(required=True)
    recipient: String(required=True)
    retry_count: Integer(required=True)
    retried_at: DateTime(required=True)
