"""Domain events for the Subscription aggregate."""

from protean.fields import Date, DateTime, Float, Identifier, Integer, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Subscription")
class SubscriptionStarted:
    __version__ = 1

    subscription_id = Identifier(required=True)
    origin_order_id = Identifier()
    customer_name = String(required=True)
    frequency = String(required=True)
    preferred_day = String(required=True)
    week_of_month = Integer()
    total_amount = Float(required=True)
    next_delivery_date = Date(required=True)
    started_at = DateTime(required=True)


@ordering.event(part_of="Subscription")
class SubscriptionPaused:
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


@ordering.event(part_of="Subscription")
class SubscriptionResumed:
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


@ordering.event(part_of="Subscription")
class SubscriptionCancelled:
    """The subscription ended. No further deliveries are scheduled."""

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


@ordering.event(part_of="Subscription")
class SubscriptionDeliveryRecorded:
    __version__ = 1

    subscription_id = Identifier(required=True)
    delivered_on = Date(required=True)
    next_delivery_date = Date(required=True)
