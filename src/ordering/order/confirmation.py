"""Order confirmation — at-most-once email request and confirmation page data.

A confirmation is requested automatically when an order is placed; admins can
also trigger it with SendOrderConfirmation. The ``confirmation_sent`` marker
on the Order makes repeated requests a no-op.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.events import OrderPlaced
from ordering.order.order import Order


@ordering.command(part_of="Order")
class SendOrderConfirmation:
    order_id = Identifier(required=True)


def request_order_confirmation(order_id) -> bool:
    """Mark the order's confirmation as requested. False if it already was."""
    repo = current_domain.repository_for(Order)
    order = repo.get(order_id)
    if not order.request_confirmation():
        logger.info("order_confirmation_already_sent", order_number=order.order_number)
        return False

    repo.add(order)
    logger.info("order_confirmation_requested", order_number=order.order_number)
    return True


@ordering.command_handler(part_of=Order)
class SendOrderConfirmationHandler:
    @handle(SendOrderConfirmation)
    def send_confirmation(self, command):
        return request_order_confirmation(command.order_id)


@ordering.event_handler(part_of=Order)
class OrderConfirmationHandler:
    """Requests the confirmation email as soon as an order is placed."""

    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        current_domain.process(SendOrderConfirmation(order_id=event.order_id), asynchronous=False)


# ---------------------------------------------------------------------------
# Confirmation page
# ---------------------------------------------------------------------------
def confirmation_query_params(order, subscription=None) -> dict[str, str]:
    """Parameters handed to the confirmation page after a successful order."""
    items = ", ".join(f"{item.product_name} x{item.quantity}" for item in order.items)
    params = {
        "orderNumber": order.order_number,
        "customerName": order.customer_name,
        "total": f"{order.total_amount:.2f}",
        "items": items,
        "deliveryAddress": order.delivery_address or "",
        "customerPhone": order.customer_phone or "",
        "isSubscription": "true" if subscription is not None else "false",
        "frequency": "",
        "subscriptionSummary": "",
    }
    if subscription is not None:
        params["frequency"] = subscription.frequency
        params["subscriptionSummary"] = subscription.schedule_summary
    return params
