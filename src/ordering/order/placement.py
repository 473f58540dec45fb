"""Order placement — command and handler.

Runs the cart builder against the live catalogue and the store's order-intake
setting, persists the resulting Order and, for recurring frequencies, starts a
Subscription from the same snapshot.
"""

import json

from protean import handle
from protean.fields import Date, Integer, String, Text
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.builder import OrderBuilder, ensure_accepting_orders
from ordering.order.order import DeliveryType, Order
from ordering.product.product import Product
from ordering.settings.store_settings import StoreSettings
from ordering.subscription.schedule import validate_schedule
from ordering.subscription.subscription import Subscription

ONE_TIME = "once"


@ordering.command(part_of="Order")
class PlaceOrder:
    items = Text(required=True)  # JSON: {product_id: quantity}
    customer_name = String(max_length=100)
    customer_email = String(max_length=254)
    customer_phone = String(max_length=30)
    delivery_type = String(max_length=20, default=DeliveryType.DELIVERY.value)
    delivery_address = Text()
    preferred_date = Date()
    preferred_time = String(max_length=20)
    frequency = String(max_length=20, default=ONE_TIME)
    preferred_day = String(max_length=10)
    week_of_month = Integer(min_value=1, max_value=4)
    order_number = String(max_length=30)  # Optional idempotency key


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order_repo = current_domain.repository_for(Order)

        if command.order_number:
            existing = order_repo.find_by_order_number(command.order_number)
            if existing is not None:
                logger.info("order_resubmitted", order_number=command.order_number, order_id=str(existing.id))
                return str(existing.id)

        receive_orders = current_domain.repository_for(StoreSettings).current().receive_orders
        ensure_accepting_orders(receive_orders)

        products = current_domain.repository_for(Product).active_products()

        builder = OrderBuilder(products)
        quantities = json.loads(command.items) if isinstance(command.items, str) else command.items
        for product_id, quantity in (quantities or {}).items():
            builder.set_quantity(product_id, quantity)

        builder.validate(
            customer={
                "name": command.customer_name,
                "email": command.customer_email,
                "phone": command.customer_phone,
            },
            delivery={
                "type": command.delivery_type,
                "address": command.delivery_address,
                "date": command.preferred_date,
                "time": command.preferred_time,
            },
        )

        recurring = bool(command.frequency) and command.frequency != ONE_TIME
        if recurring:
            validate_schedule(command.frequency, command.preferred_day, command.week_of_month)

        order = builder.submit(
            receive_orders,
            order_number=command.order_number,
            is_subscription=recurring,
        )

        if recurring:
            subscription = Subscription.start(
                order,
                frequency=command.frequency,
                preferred_day=command.preferred_day,
                week_of_month=command.week_of_month,
                start_date=command.preferred_date,
            )
            order.subscription_id = str(subscription.id)
            current_domain.repository_for(Subscription).add(subscription)

        order_repo.add(order)
        logger.info(
            "order_placed",
            order_id=str(order.id),
            order_number=order.order_number,
            total_amount=order.total_amount,
            subscription_id=order.subscription_id,
        )
        return str(order.id)
