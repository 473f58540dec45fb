"""Cross-domain event contracts for Ordering domain events.

These classes define the event shape for consumption by other domains, mainly
the Notifications domain which turns them into customer emails. They are
registered as external events via domain.register_external_event() with
matching __type__ strings so Protean's stream deserialization works.

The source-of-truth events live in src/ordering/order/events.py and
src/ordering/subscription/events.py. Every contract carries a denormalized
snapshot (customer contact, line items as JSON, totals) so consumers never
read back into the Ordering domain.
"""

from protean.core.event import BaseEvent
from protean.fields import Boolean, Date, DateTime, Float, Identifier, String, Text


class OrderConfirmationRequested(BaseEvent):
    """A newly placed order needs its (single) confirmation email."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    customer_email = String()
    customer_phone = String()
    delivery_address = String()
    delivery_type = String(required=True)
    items = Text(required=True)  # JSON list of {name, size, price, quantity}
    total_amount = Float(required=True)
    payment_method = String(required=True)
    is_subscription = Boolean(default=False)
    requested_at = DateTime(required=True)


class OrderDelivered(BaseEvent):
    """An order reached the customer."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    customer_email = String()
    delivery_address = String()
    delivery_type = String(required=True)
    items = Text(required=True)
    total_amount = Float(required=True)
    delivered_at = DateTime(required=True)


class OrderCancelled(BaseEvent):
    """An order was cancelled before delivery."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    customer_email = String()
    items = Text(required=True)
    total_amount = Float(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)


class SubscriptionPaused(BaseEvent):
    __version__ = 1

    subscription_id = Identifier(required=True)
    customer_name = String(required=True)
    customer_email = String()
    frequency = String(required=True)
    frequency_label = String()
    schedule_summary = String()
    delivery_type = String()
    items = Text(required=True)
    total_amount = Float(required=True)
    paused_at = DateTime(required=True)


class SubscriptionResumed(BaseEvent):
    __version__ = 1

    subscription_id = Identifier(required=True)
    customer_name = String(required=True)
    customer_email = String()
    frequency = String(required=True)
    frequency_label = String()
    schedule_summary = String()
    delivery_type = String()
    items = Text(required=True)
    total_amount = Float(required=True)
    next_delivery_date = Date(required=True)
    resumed_at = DateTime(required=True)


class SubscriptionCancelled(BaseEvent):
    __version__ = 1

    subscription_id = Identifier(required=True)
    customer_name = String(required=True)
    customer_email = String()
    frequency = String(required=True)
    frequency_label = String()
    schedule_summary = String()
    delivery_type = String()
    items = Text(required=True)
    total_amount = Float(required=True)
    cancelled_at = DateTime(required=True)
