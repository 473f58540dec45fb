"""Order status changes and administrative deletion — commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class TransitionOrder:
    order_id = Identifier(required=True)
    new_status = String(required=True, max_length=20)


@ordering.command(part_of="Order")
class DeleteOrder:
    """Hard delete. An administrative escape hatch, not a lifecycle transition."""

    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class OrderLifecycleHandler:
    @handle(TransitionOrder)
    def transition(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous_status = order.status
        order.transition_to(command.new_status)
        repo.add(order)
        logger.info(
            "order_status_changed",
            order_number=order.order_number,
            previous_status=previous_status,
            new_status=order.status,
        )
        return order.status

    @handle(DeleteOrder)
    def delete(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        repo._dao.delete(order)
        logger.warning("order_deleted", order_id=str(command.order_id), order_number=order.order_number)
