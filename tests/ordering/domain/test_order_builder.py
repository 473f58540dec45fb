from datetime import date

import pytest
from ordering.order.builder import MAX_QUANTITY, OrderBuilder
from ordering.order.order import Order, OrderStatus
from ordering.product.product import Product
from protean.exceptions import ValidationError
from shared.errors import OrdersClosedError

CUSTOMER = {"name": "Ana Lopez", "email": "ana@example.com", "phone": "555-0100"}
DELIVERY = {"type": "delivery", "address": "12 Palm St", "date": date(2024, 3, 1), "time": "15:30"}


@pytest.fixture()
def products():
    return {
        "classic": Product.add(name="Classic", size="16 oz", price=6.99),
        "premium": Product.add(name="Premium", size="8 oz", price=3.99),
        "office": Product.add(name="Office", size="5 Gallon", price=24.99),
        "retired": Product.add(name="Retired", size="1 L", price=1.99, is_active=False),
    }


@pytest.fixture()
def builder(products):
    return OrderBuilder(products.values())


def _pid(product):
    return str(product.id)


class TestCatalogueSnapshot:
    def test_products_sorted_by_price(self, builder):
        assert [p.name for p in builder.products] == ["Premium", "Classic", "Office"]

    def test_inactive_products_are_excluded(self, builder, products):
        with pytest.raises(ValidationError) as exc:
            builder.set_quantity(_pid(products["retired"]), 1)
        assert "product_id" in exc.value.messages

    def test_unknown_product_rejected(self, builder):
        with pytest.raises(ValidationError):
            builder.set_quantity("no-such-product", 1)


class TestQuantities:
    def test_quantity_is_stored(self, builder, products):
        assert builder.set_quantity(_pid(products["premium"]), 3) == 3
        assert builder.quantity_of(_pid(products["premium"])) == 3

    def test_negative_becomes_zero(self, builder, products):
        assert builder.set_quantity(_pid(products["premium"]), -4) == 0

    def test_non_numeric_becomes_zero(self, builder, products):
        assert builder.set_quantity(_pid(products["premium"]), "lots") == 0
        assert builder.set_quantity(_pid(products["premium"]), None) == 0

    def test_numeric_string_is_parsed(self, builder, products):
        assert builder.set_quantity(_pid(products["premium"]), "7") == 7

    def test_capped_at_maximum(self, builder, products):
        assert builder.set_quantity(_pid(products["premium"]), 500) == MAX_QUANTITY

    def test_stock_is_informational(self, builder, products):
        products["premium"].stock = 1
        assert builder.set_quantity(_pid(products["premium"]), 10) == 10


class TestTotals:
    def test_total_from_quantities(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 2)
        builder.set_quantity(_pid(products["classic"]), 1)
        assert builder.compute_total() == 14.97

    def test_total_is_recomputed_each_call(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 2)
        assert builder.compute_total() == 7.98
        builder.set_quantity(_pid(products["premium"]), 0)
        assert builder.compute_total() == 0.0

    def test_total_ignores_call_order(self, products):
        forward = OrderBuilder(products.values())
        forward.set_quantity(_pid(products["premium"]), 2)
        forward.set_quantity(_pid(products["office"]), 3)

        backward = OrderBuilder(products.values())
        backward.set_quantity(_pid(products["office"]), 3)
        backward.set_quantity(_pid(products["premium"]), 2)

        assert forward.compute_total() == backward.compute_total() == 82.95

    def test_line_items_in_catalogue_order(self, builder, products):
        builder.set_quantity(_pid(products["office"]), 1)
        builder.set_quantity(_pid(products["premium"]), 2)
        builder.set_quantity(_pid(products["classic"]), 0)

        lines = builder.get_line_items()
        assert [(p.name, q) for p, q in lines] == [("Premium", 2), ("Office", 1)]


class TestValidation:
    def test_empty_cart_rejected_first(self, builder):
        with pytest.raises(ValidationError) as exc:
            builder.validate({"name": "", "phone": ""}, {})
        assert "items" in exc.value.messages

    def test_blank_name_rejected(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        with pytest.raises(ValidationError) as exc:
            builder.validate({**CUSTOMER, "name": "   "}, DELIVERY)
        assert "customer_name" in exc.value.messages

    def test_blank_phone_rejected(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        with pytest.raises(ValidationError) as exc:
            builder.validate({**CUSTOMER, "phone": ""}, DELIVERY)
        assert "customer_phone" in exc.value.messages

    def test_delivery_requires_address(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        with pytest.raises(ValidationError) as exc:
            builder.validate(CUSTOMER, {**DELIVERY, "address": ""})
        assert "delivery_address" in exc.value.messages

    def test_pickup_does_not_require_address(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        builder.validate(CUSTOMER, {**DELIVERY, "type": "pickup", "address": ""})
        assert builder.is_validated

    def test_missing_preferred_date_rejected(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        with pytest.raises(ValidationError) as exc:
            builder.validate(CUSTOMER, {**DELIVERY, "date": None})
        assert "preferred_date" in exc.value.messages

    def test_email_is_optional(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        builder.validate({**CUSTOMER, "email": None}, DELIVERY)
        assert builder.is_validated

    def test_quantity_change_invalidates(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        builder.validate(CUSTOMER, DELIVERY)
        builder.set_quantity(_pid(products["premium"]), 2)
        assert not builder.is_validated


class TestSubmit:
    def test_closed_store_refuses(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        builder.validate(CUSTOMER, DELIVERY)
        with pytest.raises(OrdersClosedError):
            builder.submit(receive_orders=False)

    def test_closed_check_comes_before_validation_check(self, builder):
        with pytest.raises(OrdersClosedError):
            builder.submit(receive_orders=False)

    def test_unvalidated_submit_refused(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        with pytest.raises(ValidationError) as exc:
            builder.submit(receive_orders=True)
        assert not isinstance(exc.value, OrdersClosedError)

    def test_submit_builds_pending_cash_order(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 2)
        builder.set_quantity(_pid(products["classic"]), 1)
        builder.validate(CUSTOMER, DELIVERY)

        order = builder.submit(receive_orders=True)

        assert isinstance(order, Order)
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_method == "cash"
        assert order.total_amount == 14.97
        assert [(i.product_name, i.quantity) for i in order.items] == [("Premium", 2), ("Classic", 1)]

    def test_submit_uses_supplied_order_number(self, builder, products):
        builder.set_quantity(_pid(products["premium"]), 1)
        builder.validate(CUSTOMER, DELIVERY)
        order = builder.submit(receive_orders=True, order_number="AQ-20240301-ABC123")
        assert order.order_number == "AQ-20240301-ABC123"
