"""Subscription lifecycle — commands and handler."""

from datetime import UTC, datetime

from protean import handle
from protean.fields import Date, Identifier
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.subscription.subscription import Subscription


@ordering.command(part_of="Subscription")
class PauseSubscription:
    subscription_id = Identifier(required=True)


@ordering.command(part_of="Subscription")
class ResumeSubscription:
    subscription_id = Identifier(required=True)
    as_of = Date()  # Defaults to today


@ordering.command(part_of="Subscription")
class CancelSubscription:
    subscription_id = Identifier(required=True)


@ordering.command(part_of="Subscription")
class RecordSubscriptionDelivery:
    subscription_id = Identifier(required=True)
    delivered_on = Date()  # Defaults to today


@ordering.command_handler(part_of=Subscription)
class SubscriptionLifecycleHandler:
    @handle(PauseSubscription)
    def pause(self, command):
        repo = current_domain.repository_for(Subscription)
        subscription = repo.get(command.subscription_id)
        subscription.pause()
        repo.add(subscription)
        logger.info("subscription_paused", subscription_id=str(subscription.id))

    @handle(ResumeSubscription)
    def resume(self, command):
        repo = current_domain.repository_for(Subscription)
        subscription = repo.get(command.subscription_id)
        subscription.resume(command.as_of or datetime.now(UTC).date())
        repo.add(subscription)
        logger.info(
            "subscription_resumed",
            subscription_id=str(subscription.id),
            next_delivery_date=str(subscription.next_delivery_date),
        )
        return subscription.next_delivery_date

    @handle(CancelSubscription)
    def cancel(self, command):
        repo = current_domain.repository_for(Subscription)
        subscription = repo.get(command.subscription_id)
        subscription.cancel()
        repo.add(subscription)
        logger.info("subscription_cancelled", subscription_id=str(subscription.id))

    @handle(RecordSubscriptionDelivery)
    def record_delivery(self, command):
        repo = current_domain.repository_for(Subscription)
        subscription = repo.get(command.subscription_id)
        subscription.record_delivery(command.delivered_on or datetime.now(UTC).date())
        repo.add(subscription)
        return subscription.next_delivery_date
