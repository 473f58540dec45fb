"""Order export — flat rows for the admin spreadsheet download.

Formatting the rows as CSV is left to the caller.
"""

from datetime import date, datetime

EXPORT_COLUMNS = ("order_number", "customer", "items", "total", "status", "date", "address")


def _order_date(order) -> date | None:
    created = order.created_at
    if isinstance(created, datetime):
        return created.date()
    return created


def export_orders(orders, status=None, date_from=None, date_to=None) -> list[dict]:
    """Project orders into export rows, filtered by status and creation date (inclusive)."""
    rows = []
    for order in orders:
        created_on = _order_date(order)
        if status and order.status != status:
            continue
        if date_from and (created_on is None or created_on < date_from):
            continue
        if date_to and (created_on is None or created_on > date_to):
            continue

        rows.append(
            {
                "order_number": order.order_number,
                "customer": order.customer_name,
                "items": ", ".join(f"{item.product_name} × {item.quantity}" for item in order.items),
                "total": order.total_amount,
                "status": order.status,
                "date": created_on.isoformat() if created_on else "",
                "address": order.delivery_address or "",
            }
        )
    return rows
