"""Internal dispatch handler — sends queued notifications through the email channel.

Reacts to NotificationCreated and NotificationRetried events and hands the
email to the channel adapter. Updates the notification to SENT or FAILED
based on the result. No exception leaves this handler.
"""

import structlog
from notifications.channel import get_channel
from notifications.domain import notifications
from notifications.notification.events import NotificationCreated, NotificationRetried
from notifications.notification.notification import Notification, NotificationStatus
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.errors import NotificationDispatchError

logger = structlog.get_logger(__name__)


def send_email(notification: Notification) -> dict:
    """Send through the email adapter, raising if the channel reports a failure."""
    adapter = get_channel()
    result = adapter.send(
        to=notification.recipient,
        subject=notification.subject or "",
        body=notification.body,
    )
    if result.get("status") != "sent":
        raise NotificationDispatchError(result.get("error") or "Unknown dispatch error")
    return result


@notifications.event_handler(part_of=Notification)
class NotificationDispatcher:
    @handle(NotificationCreated)
    def on_notification_created(self, event: NotificationCreated) -> None:
        self._dispatch(event.notification_id)

    @handle(NotificationRetried)
    def on_notification_retried(self, event: NotificationRetried) -> None:
        self._dispatch(event.notification_id)

    def _dispatch(self, notification_id) -> None:
        repo = current_domain.repository_for(Notification)

        try:
            notification = repo.get(notification_id)
        except ObjectNotFoundError:
            logger.error("Failed to load notification for dispatch", notification_id=str(notification_id))
            return

        # Only dispatch PENDING notifications
        if NotificationStatus(notification.status) != NotificationStatus.PENDING:
            logger.info(
                "Notification not in PENDING status, skipping dispatch",
                notification_id=str(notification_id),
                status=notification.status,
            )
            return

        try:
            result = send_email(notification)
            notification.mark_sent(message_id=result.get("message_id"))
            logger.info(
                "Notification sent",
                notification_id=str(notification.id),
                notification_type=notification.notification_type,
            )
        except Exception as e:
            notification.mark_failed(str(e))
            logger.error(
                "Notification dispatch failed",
                notification_id=str(notification.id),
                notification_type=notification.notification_type,
                error=str(e),
            )

        repo.add(notification)
