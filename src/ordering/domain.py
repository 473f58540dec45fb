"""Ordering bounded context — catalogue, orders and recurring subscriptions.

Handles the product catalogue offered to customers, the order flow (cart
builder, placement, status lifecycle), recurring delivery subscriptions and
the store-wide order-intake switch. Customer emails are requested by raising
events; the Notifications domain sends them.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
