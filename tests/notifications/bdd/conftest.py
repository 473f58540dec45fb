"""Shared BDD fixtures and step definitions for the Notifications domain."""

import pytest
from notifications.notification.events import (
    NotificationCreated,
    NotificationFailed,
    NotificationRetried,
    NotificationSent,
)
from notifications.notification.notification import Notification, NotificationType
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_NOTIFICATION_EVENT_CLASSES = {
    "NotificationCreated": NotificationCreated,
    "NotificationSent": NotificationSent,
    "NotificationFailed": NotificationFailed,
    "NotificationRetried": NotificationRetried,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _pending():
    notification = Notification.create(
        recipient="ana@example.com",
        notification_type=NotificationType.ORDER_CONFIRMED.value,
        subject="Order AQ-1 received",
        body="Thanks!",
    )
    notification._events.clear()
    return notification


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a pending notification", target_fixture="notification")
def pending_notification():
    return _pending()


@given("a sent notification", target_fixture="notification")
def sent_notification():
    notification = _pending()
    notification.mark_sent(message_id="email-1")
    notification._events.clear()
    return notification


@given(parsers.cfparse("a notification that failed {count:d} times"), target_fixture="notification")
def failed_notification(count):
    notification = _pending()
    for attempt in range(count):
        if attempt:
            notification.retry()
        notification.mark_failed("Mailbox full")
    notification._events.clear()
    return notification


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the notification status is "{status}"'))
def notification_status_is(notification, status):
    assert notification.status == status


@then(parsers.cfparse("the retry count is {count:d}"))
def retry_count_is(notification, count):
    assert notification.retry_count == count


@then(parsers.cfparse("a {event_type} notification event is raised"))
def notification_event_raised(notification, event_type):
    event_cls = _NOTIFICATION_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in notification._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in notification._events]}"
