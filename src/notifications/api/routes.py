"""FastAPI routes for the Notifications domain.

Thin adapters over the Notification aggregate: list sent and failed emails
for the admin console and retry the failed ones.
"""

from fastapi import APIRouter
from notifications.api.schemas import (
    NotificationListResponse,
    NotificationResponse,
    RetryFailedResponse,
    StatusResponse,
)
from notifications.notification.notification import Notification
from notifications.notification.retry import RetryFailedNotifications, RetryNotification
from protean.utils.globals import current_domain

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        notification_id=str(notification.id),
        recipient=notification.recipient,
        recipient_type=notification.recipient_type,
        notification_type=notification.notification_type,
        subject=notification.subject,
        status=notification.status,
        source_ref=notification.source_ref,
        failure_reason=notification.failure_reason,
        retry_count=notification.retry_count or 0,
        max_retries=notification.max_retries or 0,
        sent_at=notification.sent_at,
        created_at=notification.created_at,
    )


@router.get("", response_model=NotificationListResponse)
async def list_notifications(status: str | None = None, source_ref: str | None = None) -> NotificationListResponse:
    query = current_domain.repository_for(Notification)._dao.query
    if status:
        query = query.filter(status=status)
    if source_ref:
        query = query.filter(source_ref=source_ref)
    records = sorted(query.all().items, key=lambda n: n.created_at, reverse=True)
    return NotificationListResponse(
        notifications=[_to_response(n) for n in records],
        total=len(records),
    )


@router.post("/retry-failed", response_model=RetryFailedResponse)
async def retry_failed(source_ref: str) -> RetryFailedResponse:
    """Retry every failed email for an order number or subscription."""
    queued = current_domain.process(RetryFailedNotifications(source_ref=source_ref), asynchronous=False)
    return RetryFailedResponse(source_ref=source_ref, queued=queued)


@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(notification_id: str) -> NotificationResponse:
    return _to_response(current_domain.repository_for(Notification).get(notification_id))


@router.put("/{notification_id}/retry", response_model=StatusResponse)
async def retry_notification(notification_id: str) -> StatusResponse:
    """Retry a failed notification."""
    current_domain.process(RetryNotification(notification_id=notification_id), asynchronous=False)
    return StatusResponse()
