"""Subscription aggregate — a recurring delivery of the same basket.

A subscription is started from a placed order and copies its line-item
snapshot. It is either delivering (active), on hold (paused) or finished
(cancelled). Each delivery is recorded against it and moves the schedule on.

State Machine:
    ACTIVE ⇄ PAUSED
    ACTIVE / PAUSED → CANCELLED (terminal)
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Date, DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.order import DeliveryType
from ordering.order.pricing import sum_lines
from ordering.subscription.events import (
    SubscriptionCancelled,
    SubscriptionDeliveryRecorded,
    SubscriptionPaused,
    SubscriptionResumed,
    SubscriptionStarted,
)
from ordering.subscription.schedule import (
    WEEKDAYS,
    Frequency,
    compute_next_delivery_date,
    frequency_label,
    schedule_summary,
    validate_schedule,
)
from shared.errors import InvalidTransitionError


class SubscriptionStatus(Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    SubscriptionStatus.ACTIVE: {SubscriptionStatus.PAUSED, SubscriptionStatus.CANCELLED},
    SubscriptionStatus.PAUSED: {SubscriptionStatus.ACTIVE, SubscriptionStatus.CANCELLED},
    SubscriptionStatus.CANCELLED: set(),  # Terminal
}


@ordering.entity(part_of="Subscription")
class SubscriptionItem:
    product_name = String(required=True, max_length=100)
    size = String(max_length=30)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    def to_dict(self):
        return {
            "name": self.product_name,
            "size": self.size,
            "price": self.unit_price,
            "quantity": self.quantity,
        }


@ordering.aggregate
class Subscription:
    customer_name = String(required=True, max_length=100)
    customer_email = String(max_length=254)
    customer_phone = String(max_length=30)
    delivery_address = Text()
    delivery_type = String(choices=DeliveryType, default=DeliveryType.DELIVERY.value)
    frequency = String(required=True, choices=Frequency)
    preferred_day = String(required=True, max_length=10)
    week_of_month = Integer(min_value=1, max_value=4)
    items = HasMany(SubscriptionItem)
    total_amount = Float(default=0.0, min_value=0.0)
    status = String(choices=SubscriptionStatus, default=SubscriptionStatus.ACTIVE.value)
    start_date = Date()
    next_delivery_date = Date()
    last_delivery_date = Date()
    origin_order_id = Identifier()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_match_items(self):
        expected = sum_lines((item.unit_price, item.quantity) for item in self.items)
        if round(self.total_amount or 0.0, 2) != expected:
            raise ValidationError(
                {"total_amount": [f"Total {self.total_amount} does not match subscription items ({expected})"]}
            )

    @invariant.post
    def preferred_day_must_be_a_weekday(self):
        if self.preferred_day not in WEEKDAYS:
            raise ValidationError({"preferred_day": [f"Unknown weekday '{self.preferred_day}'"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def start(cls, order, frequency, preferred_day, week_of_month=None, start_date=None):
        """Start a subscription from a placed order's snapshot."""
        validate_schedule(frequency, preferred_day, week_of_month)

        now = datetime.now(UTC)
        start_date = start_date or now.date()
        if frequency != Frequency.MONTHLY.value:
            week_of_month = None

        subscription = cls(
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            customer_phone=order.customer_phone,
            delivery_address=order.delivery_address,
            delivery_type=order.delivery_type,
            frequency=frequency,
            preferred_day=preferred_day,
            week_of_month=week_of_month,
            status=SubscriptionStatus.ACTIVE.value,
            start_date=start_date,
            next_delivery_date=compute_next_delivery_date(frequency, preferred_day, week_of_month, start_date),
            origin_order_id=str(order.id),
            created_at=now,
            updated_at=now,
        )

        items = [
            SubscriptionItem(
                product_name=item.product_name,
                size=item.size,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in order.items
        ]
        with atomic_change(subscription):
            subscription.add_items(items)
            subscription.total_amount = sum_lines((i.unit_price, i.quantity) for i in items)

        subscription.raise_(
            SubscriptionStarted(
                subscription_id=str(subscription.id),
                origin_order_id=str(order.id),
                customer_name=subscription.customer_name,
                frequency=frequency,
                preferred_day=preferred_day,
                week_of_month=week_of_month,
                total_amount=subscription.total_amount,
                next_delivery_date=subscription.next_delivery_date,
                started_at=now,
            )
        )
        return subscription

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target):
        current = SubscriptionStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise InvalidTransitionError(
                {"status": [f"Cannot change subscription from {current.value} to {target.value}"]}
            )

    def items_json(self) -> str:
        return json.dumps([item.to_dict() for item in self.items])

    @property
    def schedule_summary(self) -> str:
        return schedule_summary(self.frequency, self.preferred_day, self.week_of_month)

    def _snapshot(self):
        return {
            "subscription_id": str(self.id),
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "frequency": self.frequency,
            "frequency_label": frequency_label(self.frequency),
            "schedule_summary": self.schedule_summary,
            "delivery_type": self.delivery_type,
            "items": self.items_json(),
            "total_amount": self.total_amount,
        }

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def pause(self):
        self._assert_can_transition(SubscriptionStatus.PAUSED)

        now = datetime.now(UTC)
        self.status = SubscriptionStatus.PAUSED.value
        self.next_delivery_date = None
        self.updated_at = now

        self.raise_(SubscriptionPaused(**self._snapshot(), paused_at=now))

    def resume(self, as_of):
        """Reactivate a paused subscription, scheduling from ``as_of``.

        The originating order counts as the first delivery, so a subscription
        resumed before anything was recorded still keeps the bi-weekly gap.
        """
        self._assert_can_transition(SubscriptionStatus.ACTIVE)

        now = datetime.now(UTC)
        self.status = SubscriptionStatus.ACTIVE.value
        self.next_delivery_date = compute_next_delivery_date(
            self.frequency,
            self.preferred_day,
            self.week_of_month,
            as_of,
            last_delivery=self.last_delivery_date or self.start_date,
        )
        self.updated_at = now

        self.raise_(
            SubscriptionResumed(
                **self._snapshot(),
                next_delivery_date=self.next_delivery_date,
                resumed_at=now,
            )
        )

    def cancel(self):
        self._assert_can_transition(SubscriptionStatus.CANCELLED)

        now = datetime.now(UTC)
        self.status = SubscriptionStatus.CANCELLED.value
        self.next_delivery_date = None
        self.updated_at = now

        self.raise_(SubscriptionCancelled(**self._snapshot(), cancelled_at=now))

    def record_delivery(self, delivered_on):
        if SubscriptionStatus(self.status) != SubscriptionStatus.ACTIVE:
            raise InvalidTransitionError({"status": ["Deliveries can only be recorded for an active subscription"]})

        reference = delivered_on
        if self.frequency == Frequency.MONTHLY.value and self.next_delivery_date:
            # An early delivery stands in for the month it was scheduled in
            reference = max(delivered_on, self.next_delivery_date)

        self.last_delivery_date = delivered_on
        self.next_delivery_date = compute_next_delivery_date(
            self.frequency,
            self.preferred_day,
            self.week_of_month,
            reference,
            last_delivery=delivered_on,
        )
        self.updated_at = datetime.now(UTC)

        self.raise_(
            SubscriptionDeliveryRecorded(
                subscription_id=str(self.id),
                delivered_on=delivered_on,
                next_delivery_date=self.next_delivery_date,
            )
        )
