from datetime import UTC, date, datetime

from ordering.order.export import EXPORT_COLUMNS, export_orders
from ordering.order.order import Order


def _order(name, status="pending", created=datetime(2024, 3, 1, 10, 0, tzinfo=UTC), delivery_type="delivery"):
    order = Order.place(
        customer={"name": name, "phone": "555"},
        delivery={"type": delivery_type, "address": "12 Palm St", "date": date(2024, 3, 2)},
        lines=[
            {"product_name": "Premium", "size": "8 oz", "unit_price": 3.99, "quantity": 2},
            {"product_name": "Classic", "size": "16 oz", "unit_price": 6.99, "quantity": 1},
        ],
        order_number=f"AQ-{name.upper()}",
    )
    order.status = status
    order.created_at = created
    return order


class TestExportRows:
    def test_row_shape(self):
        rows = export_orders([_order("ana")])
        assert tuple(rows[0].keys()) == EXPORT_COLUMNS
        assert rows[0] == {
            "order_number": "AQ-ANA",
            "customer": "ana",
            "items": "Premium × 2, Classic × 1",
            "total": 14.97,
            "status": "pending",
            "date": "2024-03-01",
            "address": "12 Palm St",
        }

    def test_pickup_has_blank_address(self):
        rows = export_orders([_order("ana", delivery_type="pickup")])
        assert rows[0]["address"] == ""

    def test_empty_input(self):
        assert export_orders([]) == []


class TestExportFilters:
    def test_status_filter(self):
        orders = [_order("ana"), _order("ben", status="delivered")]
        rows = export_orders(orders, status="delivered")
        assert [r["customer"] for r in rows] == ["ben"]

    def test_date_bounds_are_inclusive(self):
        orders = [
            _order("early", created=datetime(2024, 2, 28, 23, 0, tzinfo=UTC)),
            _order("first", created=datetime(2024, 3, 1, 0, 5, tzinfo=UTC)),
            _order("last", created=datetime(2024, 3, 31, 23, 59, tzinfo=UTC)),
            _order("late", created=datetime(2024, 4, 1, 0, 0, tzinfo=UTC)),
        ]
        rows = export_orders(orders, date_from=date(2024, 3, 1), date_to=date(2024, 3, 31))
        assert [r["customer"] for r in rows] == ["first", "last"]
