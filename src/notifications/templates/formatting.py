"""Formatting helpers shared by the email templates."""

PICKUP = "pickup"


def money(amount) -> str:
    return f"${float(amount or 0):.2f}"


def item_lines(items) -> str:
    """One line per item: "2 x Premium (8 oz) @ $3.99"."""
    lines = []
    for item in items or []:
        size = f" ({item['size']})" if item.get("size") else ""
        lines.append(f"  {item['quantity']} x {item['name']}{size} @ {money(item['price'])}")
    return "\n".join(lines)


def delivery_line(context: dict) -> str:
    if context.get("deliveryType") == PICKUP:
        return "Pickup at our store"
    return f"Delivery to: {context.get('deliveryAddress') or 'N/A'}"
