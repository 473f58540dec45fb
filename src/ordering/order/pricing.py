"""Money arithmetic for order and subscription totals.

Prices are stored as floats on the aggregates; sums are taken in Decimal and
rounded to cents so that 3.99 * 2 + 6.99 comes out as 14.97 exactly.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(unit_price, quantity) -> float:
    return float(to_money(to_money(unit_price) * int(quantity)))


def sum_lines(lines) -> float:
    """Total of ``(unit_price, quantity)`` pairs, rounded to cents."""
    total = sum((to_money(price) * int(qty) for price, qty in lines), Decimal("0"))
    return float(total.quantize(CENT, rounding=ROUND_HALF_UP))
