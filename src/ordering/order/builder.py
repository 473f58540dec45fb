"""Cart/Order builder — quantities, totals and validation before placement.

The builder works on a snapshot of the active catalogue taken when the order
flow starts. It holds no persistence of its own: ``submit`` returns a pending
``Order`` and the PlaceOrder handler persists it.
"""

from datetime import date

from protean.exceptions import ValidationError

from ordering.order.order import DeliveryType, Order
from ordering.order.pricing import sum_lines
from ordering.product.repository import catalogue_order
from shared.errors import OrdersClosedError

MAX_QUANTITY = 99


def _coerce_quantity(quantity) -> int:
    """Clamp raw input into 0..MAX_QUANTITY. Anything unparsable counts as 0."""
    try:
        value = int(quantity)
    except (TypeError, ValueError):
        return 0
    if value < 0:
        return 0
    return min(value, MAX_QUANTITY)


def _blank(value) -> bool:
    return value is None or not str(value).strip()


def ensure_accepting_orders(receive_orders: bool) -> None:
    if not receive_orders:
        raise OrdersClosedError({"receive_orders": ["We are not accepting new orders at the moment"]})


class OrderBuilder:
    def __init__(self, products):
        self.products = catalogue_order(p for p in products if p.is_active)
        self._by_id = {str(p.id): p for p in self.products}
        self.quantities: dict[str, int] = {}
        self.customer: dict = {}
        self.delivery: dict = {}
        self._validated = False

    # -------------------------------------------------------------------
    # Quantities and totals
    # -------------------------------------------------------------------
    def set_quantity(self, product_id, quantity) -> int:
        product_id = str(product_id)
        if product_id not in self._by_id:
            raise ValidationError({"product_id": [f"Product {product_id} is not available"]})

        value = _coerce_quantity(quantity)
        self.quantities[product_id] = value
        self._validated = False
        return value

    def quantity_of(self, product_id) -> int:
        return self.quantities.get(str(product_id), 0)

    def get_line_items(self):
        """(product, quantity) pairs with quantity > 0, in catalogue order."""
        return [(p, self.quantities[str(p.id)]) for p in self.products if self.quantities.get(str(p.id), 0) > 0]

    def compute_total(self) -> float:
        return sum_lines((product.price, qty) for product, qty in self.get_line_items())

    # -------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------
    def validate(self, customer: dict, delivery: dict) -> None:
        """Check the order input, raising on the first rule that fails."""
        self._validated = False

        if not self.get_line_items():
            raise ValidationError({"items": ["Please select at least one product"]})
        if _blank(customer.get("name")):
            raise ValidationError({"customer_name": ["Please enter your name"]})
        if _blank(customer.get("phone")):
            raise ValidationError({"customer_phone": ["Please enter your phone number"]})

        delivery_type = delivery.get("type") or DeliveryType.DELIVERY.value
        if delivery_type not in {t.value for t in DeliveryType}:
            raise ValidationError({"delivery_type": [f"Unknown delivery type '{delivery_type}'"]})
        if delivery_type == DeliveryType.DELIVERY.value and _blank(delivery.get("address")):
            raise ValidationError({"delivery_address": ["Please enter your delivery address"]})
        if not isinstance(delivery.get("date"), date):
            raise ValidationError({"preferred_date": ["Please select a preferred date"]})

        self.customer = dict(customer)
        self.delivery = dict(delivery, type=delivery_type)
        self._validated = True

    @property
    def is_validated(self) -> bool:
        return self._validated

    # -------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------
    def submit(self, receive_orders: bool, order_number=None, is_subscription=False) -> Order:
        ensure_accepting_orders(receive_orders)
        if not self._validated:
            raise ValidationError({"order": ["Order details must be validated before submitting"]})

        lines = [
            {
                "product_name": product.name,
                "size": product.size,
                "unit_price": product.price,
                "quantity": qty,
            }
            for product, qty in self.get_line_items()
        ]
        return Order.place(
            customer=self.customer,
            delivery=self.delivery,
            lines=lines,
            order_number=order_number,
            is_subscription=is_subscription,
        )
