"""Repository for the Subscription aggregate."""

from protean.exceptions import ValidationError

from ordering.domain import ordering
from ordering.subscription.subscription import Subscription, SubscriptionStatus
from shared.errors import persistence_errors


@ordering.repository(part_of=Subscription)
class SubscriptionRepository:
    def list_subscriptions(self, status: str | None = None, customer_email: str | None = None) -> list[Subscription]:
        if status and status not in {s.value for s in SubscriptionStatus}:
            raise ValidationError({"status": [f"Unknown subscription status '{status}'"]})

        with persistence_errors("list subscriptions"):
            query = self._dao.query
            if status:
                query = query.filter(status=status)
            subscriptions = query.all().items
        if customer_email is not None:
            wanted = customer_email.strip().lower()
            subscriptions = [s for s in subscriptions if wanted and (s.customer_email or "").strip().lower() == wanted]
        return sorted(subscriptions, key=lambda s: s.created_at, reverse=True)

    def due_on_or_before(self, day) -> list[Subscription]:
        """Active subscriptions whose next delivery is due by ``day``."""
        with persistence_errors("list due subscriptions"):
            active = self._dao.query.filter(status=SubscriptionStatus.ACTIVE.value).all().items
        return sorted(
            (s for s in active if s.next_delivery_date and s.next_delivery_date <= day),
            key=lambda s: s.next_delivery_date,
        )
