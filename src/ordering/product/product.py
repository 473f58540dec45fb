"""Product aggregate — the catalogue entries customers can order.

Products are only mutated by administrative commands. The ordering flow reads
them as a snapshot: prices and names are copied into each order's line items,
so later catalogue edits never rewrite order history. Stock is informational
only; placing an order does not reserve or decrement it.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from ordering.domain import ordering
from ordering.product.events import (
    ProductActivated,
    ProductAdded,
    ProductDeactivated,
    ProductDetailsUpdated,
    ProductPriceChanged,
    ProductStockAdjusted,
)


@ordering.aggregate
class Product:
    name = String(required=True, max_length=100)
    size = String(max_length=30)  # Display label, e.g. "16 oz" or "5 Gal"
    description = Text()
    image_url = String(max_length=500)
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)
    is_active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def add(cls, name, price, size=None, stock=0, description=None, image_url=None, is_active=True):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            size=size,
            price=price,
            stock=stock,
            description=description,
            image_url=image_url,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                size=size,
                price=price,
                stock=stock,
                added_at=now,
            )
        )
        return product

    def update_details(self, name=None, size=None, description=None, image_url=None):
        if name is not None:
            self.name = name
        if size is not None:
            self.size = size
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                size=self.size,
            )
        )

    def change_price(self, new_price):
        if new_price is None or new_price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductPriceChanged(
                product_id=str(self.id),
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def adjust_stock(self, new_stock):
        if new_stock is None or new_stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

        previous_stock = self.stock
        self.stock = new_stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductStockAdjusted(
                product_id=str(self.id),
                previous_stock=previous_stock,
                new_stock=new_stock,
            )
        )

    def activate(self):
        if self.is_active:
            raise ValidationError({"is_active": ["Product is already active"]})

        self.is_active = True
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductActivated(product_id=str(self.id)))

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Product is already inactive"]})

        self.is_active = False
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductDeactivated(product_id=str(self.id)))
