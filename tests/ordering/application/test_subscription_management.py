"""Application tests for subscription lifecycle commands."""

import json
from datetime import date

import pytest
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from ordering.subscription.management import (
    CancelSubscription,
    PauseSubscription,
    RecordSubscriptionDelivery,
    ResumeSubscription,
)
from ordering.subscription.subscription import Subscription
from protean.utils.globals import current_domain
from shared.errors import InvalidTransitionError


def _subscribe(catalogue, frequency="biweekly", preferred_day="friday", week_of_month=None):
    order_id = current_domain.process(
        PlaceOrder(
            items=json.dumps({str(catalogue["Office"].id): 1}),
            customer_name="Dana Reyes",
            customer_email="dana@example.com",
            customer_phone="555-0102",
            delivery_address="3 Hill Ct",
            preferred_date=date(2024, 1, 10),
            frequency=frequency,
            preferred_day=preferred_day,
            week_of_month=week_of_month,
        ),
        asynchronous=False,
    )
    return current_domain.repository_for(Order).get(order_id).subscription_id


def _get(subscription_id):
    return current_domain.repository_for(Subscription).get(subscription_id)


class TestPauseAndResume:
    def test_pause(self, catalogue):
        subscription_id = _subscribe(catalogue)
        current_domain.process(PauseSubscription(subscription_id=subscription_id), asynchronous=False)

        subscription = _get(subscription_id)
        assert subscription.status == "paused"
        assert subscription.next_delivery_date is None

    def test_resume_returns_next_date(self, catalogue):
        subscription_id = _subscribe(catalogue)
        current_domain.process(PauseSubscription(subscription_id=subscription_id), asynchronous=False)

        next_date = current_domain.process(
            ResumeSubscription(subscription_id=subscription_id, as_of=date(2024, 3, 1)),
            asynchronous=False,
        )

        assert next_date == date(2024, 3, 8)
        assert _get(subscription_id).next_delivery_date == date(2024, 3, 8)

    def test_resume_defaults_to_today(self, catalogue):
        subscription_id = _subscribe(catalogue)
        current_domain.process(PauseSubscription(subscription_id=subscription_id), asynchronous=False)
        current_domain.process(ResumeSubscription(subscription_id=subscription_id), asynchronous=False)

        subscription = _get(subscription_id)
        assert subscription.status == "active"
        assert subscription.next_delivery_date.weekday() == 4


class TestCancel:
    def test_cancel(self, catalogue):
        subscription_id = _subscribe(catalogue)
        current_domain.process(CancelSubscription(subscription_id=subscription_id), asynchronous=False)
        assert _get(subscription_id).status == "cancelled"

    def test_cancel_twice(self, catalogue):
        subscription_id = _subscribe(catalogue)
        current_domain.process(CancelSubscription(subscription_id=subscription_id), asynchronous=False)
        with pytest.raises(InvalidTransitionError):
            current_domain.process(CancelSubscription(subscription_id=subscription_id), asynchronous=False)


class TestRecordDelivery:
    def test_monthly_delivery_moves_schedule(self, catalogue):
        subscription_id = _subscribe(catalogue, "monthly", "monday", 2)

        next_date = current_domain.process(
            RecordSubscriptionDelivery(subscription_id=subscription_id, delivered_on=date(2024, 2, 12)),
            asynchronous=False,
        )

        assert next_date == date(2024, 3, 11)
        assert _get(subscription_id).last_delivery_date == date(2024, 2, 12)

    def test_due_subscriptions(self, catalogue):
        early = _subscribe(catalogue)
        late = _subscribe(catalogue, "monthly", "monday", 2)

        repo = current_domain.repository_for(Subscription)
        assert [str(s.id) for s in repo.due_on_or_before(date(2024, 1, 31))] == [early]
        assert [str(s.id) for s in repo.due_on_or_before(date(2024, 2, 12))] == [early, late]

        current_domain.process(PauseSubscription(subscription_id=early), asynchronous=False)
        assert [str(s.id) for s in repo.due_on_or_before(date(2024, 2, 12))] == [late]


class TestListSubscriptions:
    def test_customer_filter(self, catalogue):
        mine = _subscribe(catalogue)
        current_domain.process(
            PlaceOrder(
                items=json.dumps({str(catalogue["Office"].id): 2}),
                customer_name="Eli Park",
                customer_email="eli@example.com",
                customer_phone="555-0103",
                delivery_address="9 Bay Rd",
                preferred_date=date(2024, 1, 10),
                frequency="monthly",
                preferred_day="monday",
                week_of_month=1,
            ),
            asynchronous=False,
        )

        repo = current_domain.repository_for(Subscription)
        assert [str(s.id) for s in repo.list_subscriptions(customer_email="DANA@example.com")] == [mine]
        assert len(repo.list_subscriptions()) == 2
        assert repo.list_subscriptions(customer_email="nobody@example.com") == []
