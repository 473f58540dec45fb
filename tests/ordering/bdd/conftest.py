"""Shared BDD fixtures and step definitions for the Ordering domain."""

from datetime import date

import pytest
from ordering.order.builder import OrderBuilder
from ordering.order.events import (
    OrderCancelled,
    OrderConfirmationRequested,
    OrderDelivered,
    OrderPlaced,
    OrderStatusChanged,
)
from ordering.order.order import Order
from ordering.product.product import Product
from ordering.subscription.events import (
    SubscriptionCancelled,
    SubscriptionDeliveryRecorded,
    SubscriptionPaused,
    SubscriptionResumed,
)
from ordering.subscription.subscription import Subscription
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_ORDER_EVENT_CLASSES = {
    "OrderPlaced": OrderPlaced,
    "OrderStatusChanged": OrderStatusChanged,
    "OrderDelivered": OrderDelivered,
    "OrderCancelled": OrderCancelled,
    "OrderConfirmationRequested": OrderConfirmationRequested,
}

_SUBSCRIPTION_EVENT_CLASSES = {
    "SubscriptionPaused": SubscriptionPaused,
    "SubscriptionResumed": SubscriptionResumed,
    "SubscriptionCancelled": SubscriptionCancelled,
    "SubscriptionDeliveryRecorded": SubscriptionDeliveryRecorded,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _place_order(status="pending"):
    order = Order.place(
        customer={"name": "Ana Lopez", "email": "ana@example.com", "phone": "555-0100"},
        delivery={"type": "delivery", "address": "12 Palm St", "date": date(2024, 1, 10)},
        lines=[
            {"product_name": "Premium", "size": "8 oz", "unit_price": 3.99, "quantity": 2},
            {"product_name": "Classic", "size": "16 oz", "unit_price": 6.99, "quantity": 1},
        ],
    )
    order.status = status
    order._events.clear()
    return order


# ---------------------------------------------------------------------------
# Given steps: Catalogue and builder
# ---------------------------------------------------------------------------
@given("the starter catalogue", target_fixture="products")
def starter_catalogue():
    return {
        name: Product.add(name=name, size=size, price=price)
        for name, size, price in [
            ("Premium", "8 oz", 3.99),
            ("Classic", "16 oz", 6.99),
            ("Grande", "32 oz", 12.99),
        ]
    }


@given("an empty order form", target_fixture="builder")
def empty_order_form(products):
    return OrderBuilder(products.values())


# ---------------------------------------------------------------------------
# Given steps: Order
# ---------------------------------------------------------------------------
@given("a pending order", target_fixture="order")
def pending_order():
    return _place_order()


@given(parsers.cfparse('an order in status "{status}"'), target_fixture="order")
def order_in_status(status):
    return _place_order(status)


# ---------------------------------------------------------------------------
# Given steps: Subscription
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('an active {frequency} subscription for {day} starting {start}'),
    target_fixture="subscription",
)
def active_subscription(frequency, day, start):
    subscription = Subscription.start(
        _place_order(),
        frequency=frequency,
        preferred_day=day.lower(),
        week_of_month=2 if frequency == "monthly" else None,
        start_date=date.fromisoformat(start),
    )
    subscription._events.clear()
    return subscription


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse("a {event_type} order event is raised"))
def order_event_raised(order, event_type):
    event_cls = _ORDER_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in order._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in order._events]}"


@then("no order event is raised")
def no_order_event(order):
    assert order._events == []


@then(parsers.cfparse('the subscription status is "{status}"'))
def subscription_status_is(subscription, status):
    assert subscription.status == status


@then(parsers.cfparse("a {event_type} subscription event is raised"))
def subscription_event_raised(subscription, event_type):
    event_cls = _SUBSCRIPTION_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in subscription._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in subscription._events]}"


@then(parsers.cfparse("the next delivery is on {day}"))
def next_delivery_is(subscription, day):
    assert subscription.next_delivery_date == date.fromisoformat(day)


@then("there is no next delivery")
def no_next_delivery(subscription):
    assert subscription.next_delivery_date is None
