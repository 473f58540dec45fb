"""Notifications bounded context — transactional email for orders and subscriptions.

Consumes Ordering events (confirmation requests, deliveries, cancellations and
subscription changes), renders an email per event and sends it through the
email channel. Each email is tracked as a Notification so failures can be
inspected and retried. Sending never blocks or rolls back the Ordering change
that caused it.
"""

import structlog
from protean.domain import Domain

notifications = Domain(name="notifications")

logger = structlog.get_logger(__name__)
