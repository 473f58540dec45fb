"""Domain events for the Order aggregate.

Events are raised by the aggregate and dispatched after the repository
commits the change. The delivered, cancelled and confirmation events carry a
denormalized snapshot of the order so the Notifications domain can render an
email without reading back into Ordering. Their shapes mirror the contracts in
src/shared/events/ordering.py.
"""

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer submitted a valid order."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    delivery_type = String(required=True)
    items = Text(required=True)  # JSON: list of {name, size, price, quantity}
    total_amount = Float(required=True)
    is_subscription = Boolean(default=False)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderConfirmationRequested:
    """The order's confirmation email should be sent. Raised at most once per order."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    customer_email = String()
    customer_phone = String()
    delivery_address = String()
    delivery_type = String(required=True)
    items = Text(required=True)
    total_amount = Float(required=True)
    payment_method = String(required=True)
    is_subscription = Boolean(default=False)
    requested_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderDelivered:
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


@ordering.event(part_of="Order")
class OrderCancelled:
    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    customer_email = String()
    items = Text(required=True)
    total_amount = Float(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
