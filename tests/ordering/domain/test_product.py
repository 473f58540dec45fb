import pytest
from ordering.product.events import (
    ProductActivated,
    ProductAdded,
    ProductDeactivated,
    ProductPriceChanged,
    ProductStockAdjusted,
)
from ordering.product.product import Product
from ordering.product.repository import catalogue_order
from protean.exceptions import ValidationError


def _product(**overrides):
    values = {"name": "Classic", "size": "16 oz", "price": 6.99, "stock": 10}
    values.update(overrides)
    product = Product.add(**values)
    product._events.clear()
    return product


class TestProductAdd:
    def test_add_defaults_to_active(self):
        product = Product.add(name="Premium", size="8 oz", price=3.99)
        assert product.is_active is True
        assert product.stock == 0
        assert isinstance(product._events[0], ProductAdded)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product.add(name="Premium", price=-1.0)

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Product.add(name=None, price=3.99)


class TestProductChanges:
    def test_update_details_keeps_unspecified_fields(self):
        product = _product()
        product.update_details(description="Filtered twice")
        assert product.name == "Classic"
        assert product.description == "Filtered twice"

    def test_change_price(self):
        product = _product()
        product.change_price(7.49)
        assert product.price == 7.49
        event = product._events[0]
        assert isinstance(event, ProductPriceChanged)
        assert (event.previous_price, event.new_price) == (6.99, 7.49)

    def test_change_price_negative(self):
        product = _product()
        with pytest.raises(ValidationError) as exc:
            product.change_price(-0.01)
        assert "price" in exc.value.messages
        assert product.price == 6.99

    def test_adjust_stock(self):
        product = _product()
        product.adjust_stock(3)
        assert product.stock == 3
        assert isinstance(product._events[0], ProductStockAdjusted)

    def test_adjust_stock_negative(self):
        product = _product()
        with pytest.raises(ValidationError):
            product.adjust_stock(-1)


class TestProductActivation:
    def test_deactivate_then_activate(self):
        product = _product()
        product.deactivate()
        assert product.is_active is False
        product.activate()
        assert product.is_active is True
        assert [type(e) for e in product._events] == [ProductDeactivated, ProductActivated]

    def test_activate_active_rejected(self):
        with pytest.raises(ValidationError):
            _product().activate()

    def test_deactivate_inactive_rejected(self):
        product = _product(is_active=False)
        with pytest.raises(ValidationError):
            product.deactivate()


class TestCatalogueOrder:
    def test_cheapest_first_then_name(self):
        products = [
            _product(name="Office", price=24.99),
            _product(name="Beta", price=3.99),
            _product(name="Alpha", price=3.99),
        ]
        assert [p.name for p in catalogue_order(products)] == ["Alpha", "Beta", "Office"]
