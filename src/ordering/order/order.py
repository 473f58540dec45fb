"""Order aggregate — a customer's submitted order and its status lifecycle.

An Order is created by the cart builder once the customer's input validated.
Its line items are a frozen snapshot of product name, size and price at the
time of ordering; the total is derived from them and never set independently.

State Machine:
    PENDING → CONFIRMED → PROCESSING → DELIVERED
    Any non-terminal state may jump forward to DELIVERED or CANCELLED.
    DELIVERED and CANCELLED are terminal.
"""

import json
import secrets
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.events import (
    OrderCancelled,
    OrderConfirmationRequested,
    OrderDelivered,
    OrderPlaced,
    OrderStatusChanged,
)
from ordering.order.pricing import sum_lines
from shared.errors import InvalidTransitionError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"  # In transit
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class DeliveryType(Enum):
    DELIVERY = "delivery"
    PICKUP = "pickup"


class PaymentMethod(Enum):
    CASH = "cash"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {
        OrderStatus.CONFIRMED,
        OrderStatus.PROCESSING,
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    },
    OrderStatus.CONFIRMED: {OrderStatus.PROCESSING, OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


def allowed_transitions(status) -> set[str]:
    """Status values reachable from ``status`` in one step."""
    return {s.value for s in _VALID_TRANSITIONS.get(OrderStatus(status), set())}


def generate_order_number(now=None) -> str:
    now = now or datetime.now(UTC)
    return f"AQ-{now:%Y%m%d}-{secrets.token_hex(3).upper()}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderLineItem:
    """Snapshot of one product line at ordering time.

    Holds the product's name, size and price as they were when the order was
    placed, never a live reference into the catalogue.
    """

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


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    order_number = String(required=True, max_length=30)
    customer_name = String(required=True, max_length=100)
    customer_email = String(max_length=254)
    customer_phone = String(max_length=30)
    delivery_address = Text()
    delivery_type = String(choices=DeliveryType, default=DeliveryType.DELIVERY.value)
    preferred_date = Date()
    preferred_time = String(max_length=20)
    items = HasMany(OrderLineItem)
    total_amount = Float(default=0.0, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.CASH.value)
    is_subscription = Boolean(default=False)
    subscription_id = Identifier()
    confirmation_sent = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_match_line_items(self):
        expected = sum_lines((item.unit_price, item.quantity) for item in self.items)
        if round(self.total_amount or 0.0, 2) != expected:
            raise ValidationError(
                {"total_amount": [f"Total {self.total_amount} does not match line items ({expected})"]}
            )

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer,
        delivery,
        lines,
        order_number=None,
        is_subscription=False,
    ):
        """Create a pending order from validated cart input.

        Args:
            customer: Dict with name, email, phone.
            delivery: Dict with type, address, date, time.
            lines: List of dicts with product_name, size, unit_price, quantity.
            order_number: Client-supplied number, generated when omitted.
            is_subscription: Whether the order started a recurring subscription.
        """
        now = datetime.now(UTC)
        line_items = [OrderLineItem(**line) for line in lines]
        delivery_type = delivery.get("type") or DeliveryType.DELIVERY.value

        order = cls(
            order_number=order_number or generate_order_number(now),
            customer_name=customer.get("name", "").strip(),
            customer_email=(customer.get("email") or "").strip() or None,
            customer_phone=(customer.get("phone") or "").strip(),
            delivery_address=(delivery.get("address") or "").strip()
            if delivery_type == DeliveryType.DELIVERY.value
            else None,
            delivery_type=delivery_type,
            preferred_date=delivery.get("date"),
            preferred_time=delivery.get("time"),
            status=OrderStatus.PENDING.value,
            payment_method=PaymentMethod.CASH.value,
            is_subscription=is_subscription,
            created_at=now,
            updated_at=now,
        )

        with atomic_change(order):
            order.add_items(line_items)
            order.total_amount = sum_lines((line.unit_price, line.quantity) for line in line_items)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                customer_name=order.customer_name,
                delivery_type=order.delivery_type,
                items=order.items_json(),
                total_amount=order.total_amount,
                is_subscription=order.is_subscription,
                placed_at=now,
            )
        )
        return order

    def items_json(self) -> str:
        return json.dumps([item.to_dict() for item in self.items])

    # -------------------------------------------------------------------
    # Status lifecycle
    # -------------------------------------------------------------------
    def _assert_can_transition(self, new_status):
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise InvalidTransitionError({"status": [f"Unknown order status '{new_status}'"]}) from None

        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise InvalidTransitionError({"status": [f"Cannot transition from {current.value} to {target.value}"]})
        return target

    def transition_to(self, new_status):
        """Move the order to ``new_status`` if the transition table allows it."""
        target = self._assert_can_transition(new_status)

        previous_status = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                order_number=self.order_number,
                previous_status=previous_status,
                new_status=target.value,
                changed_at=now,
            )
        )

        if target == OrderStatus.DELIVERED:
            self.raise_(
                OrderDelivered(
                    order_id=str(self.id),
                    order_number=self.order_number,
                    customer_name=self.customer_name,
                    customer_email=self.customer_email,
                    delivery_address=self.delivery_address,
                    delivery_type=self.delivery_type,
                    items=self.items_json(),
                    total_amount=self.total_amount,
                    delivered_at=now,
                )
            )
        elif target == OrderStatus.CANCELLED:
            self.raise_(
                OrderCancelled(
                    order_id=str(self.id),
                    order_number=self.order_number,
                    customer_name=self.customer_name,
                    customer_email=self.customer_email,
                    items=self.items_json(),
                    total_amount=self.total_amount,
                    previous_status=previous_status,
                    cancelled_at=now,
                )
            )

    # -------------------------------------------------------------------
    # Confirmation email
    # -------------------------------------------------------------------
    def request_confirmation(self) -> bool:
        """Request the confirmation email once. Returns False if already requested."""
        if self.confirmation_sent:
            return False

        now = datetime.now(UTC)
        self.confirmation_sent = True
        self.updated_at = now

        self.raise_(
            OrderConfirmationRequested(
                order_id=str(self.id),
                order_number=self.order_number,
                customer_name=self.customer_name,
                customer_email=self.customer_email,
                customer_phone=self.customer_phone,
                delivery_address=self.delivery_address,
                delivery_type=self.delivery_type,
                items=self.items_json(),
                total_amount=self.total_amount,
                payment_method=self.payment_method,
                is_subscription=self.is_subscription,
                requested_at=now,
            )
        )
        return True
