"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    size = String()
    price = Float(required=True)
    stock = Integer()
    added_at = DateTime(required=True)


@ordering.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    size = String()


@ordering.event(part_of="Product")
class ProductPriceChanged:
    """The catalogue price changed. Existing orders keep their snapshot price."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    new_price = Float(required=True)


@ordering.event(part_of="Product")
class ProductStockAdjusted:
    __version__ = 1

    product_id = Identifier(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)


@ordering.event(part_of="Product")
class ProductActivated:
    __version__ = 1

    product_id = Identifier(required=True)


@ordering.event(part_of="Product")
class ProductDeactivated:
    """The product was withdrawn from ordering flows."""

    __version__ = 1

    product_id = Identifier(required=True)
