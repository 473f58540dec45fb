"""Repository for the Product aggregate."""

from ordering.domain import ordering
from ordering.product.product import Product


def catalogue_order(products):
    """Sort products the way every ordering screen shows them: cheapest first."""
    return sorted(products, key=lambda p: (p.price, p.name))


@ordering.repository(part_of=Product)
class ProductRepository:
    def all_products(self) -> list[Product]:
        return catalogue_order(self._dao.query.all().items)

    def active_products(self) -> list[Product]:
        """Products that may appear in ordering flows."""
        return catalogue_order(self._dao.query.filter(is_active=True).all().items)
