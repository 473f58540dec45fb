"""Retrying failed emails.

``RetryNotification`` re-queues one failed notification. ``RetryFailedNotifications``
re-queues every failed email for one order number or subscription, skipping
the ones that have used up their attempts. The dispatcher picks each one up
again from ``NotificationRetried``.
"""

import structlog
from notifications.domain import notifications
from notifications.notification.notification import Notification, NotificationStatus
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

logger = structlog.get_logger(__name__)


@notifications.command(part_of="Notification")
class RetryNotification:
    notification_id: Identifier(required=True)


@notifications.command(part_of="Notification")
class RetryFailedNotifications:
    """Retry all failed emails for an order number or subscription id."""

    source_ref: String(required=True, max_length=100)


@notifications.command_handler(part_of=Notification)
class RetryNotificationHandler:
    @handle(RetryNotification)
    def retry_notification(self, command: RetryNotification):
        repo = current_domain.repository_for(Notification)
        notification = repo.get(command.notification_id)
        notification.retry()
        repo.add(notification)

        logger.info(
            "Notification retry queued",
            notification_id=str(notification.id),
            notification_type=notification.notification_type,
            source_ref=notification.source_ref,
            attempt=notification.retry_count + 1,
        )

    @handle(RetryFailedNotifications)
    def retry_failed_notifications(self, command: RetryFailedNotifications) -> int:
        repo = current_domain.repository_for(Notification)
        failed = repo._dao.query.filter(
            source_ref=command.source_ref,
            status=NotificationStatus.FAILED.value,
        ).all().items

        queued = 0
        for notification in failed:
            if notification.retry_count >= notification.max_retries:
                logger.warning(
                    "Notification retries exhausted",
                    notification_id=str(notification.id),
                    source_ref=command.source_ref,
                )
                continue
            notification.retry()
            repo.add(notification)
            queued += 1

        logger.info("Failed notifications re-queued", source_ref=command.source_ref, queued=queued)
        return queued
