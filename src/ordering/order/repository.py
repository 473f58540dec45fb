"""Repository for the Order aggregate."""

from protean.exceptions import ValidationError

from ordering.domain import ordering
from ordering.order.order import Order, OrderStatus
from shared.errors import persistence_errors


def _same_email(stored, wanted) -> bool:
    return bool(stored) and stored.strip().lower() == wanted.strip().lower()


@ordering.repository(part_of=Order)
class OrderRepository:
    def find_by_order_number(self, order_number: str) -> Order | None:
        with persistence_errors("find order by number"):
            matches = self._dao.query.filter(order_number=order_number).all().items
        return matches[0] if matches else None

    def list_orders(self, status: str | None = None, customer_email: str | None = None) -> list[Order]:
        """Orders, newest first, optionally restricted to one status.

        ``customer_email`` narrows the list to one customer's own orders. The
        match ignores case and surrounding whitespace.
        """
        if status and status not in {s.value for s in OrderStatus}:
            raise ValidationError({"status": [f"Unknown order status '{status}'"]})

        with persistence_errors("list orders"):
            query = self._dao.query
            if status:
                query = query.filter(status=status)
            orders = query.all().items
        if customer_email is not None:
            orders = [o for o in orders if _same_email(o.customer_email, customer_email)]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)
