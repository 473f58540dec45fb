"""Pydantic response models for the Notifications API.

API schemas are separate from Protean commands (anti-corruption pattern).
"""

from datetime import datetime

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    notification_id: str
    recipient: str
    recipient_type: str
    notification_type: str
    subject: str | None = None
    status: str
    source_ref: str | None = None
    failure_reason: str | None = None
    retry_count: int = 0
    max_retries: int = 3
    sent_at: datetime | None = None
    created_at: datetime | None = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
    total: int


class StatusResponse(BaseModel):
    status: str = "ok"


class RetryFailedResponse(BaseModel):
    source_ref: str
    queued: int
