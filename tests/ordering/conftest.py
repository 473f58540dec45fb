import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def catalogue():
    """The starter catalogue, persisted. Keyed by product name."""
    from ordering.product.product import Product
    from protean import current_domain

    repo = current_domain.repository_for(Product)
    products = {}
    for name, size, price in [
        ("Premium", "8 oz", 3.99),
        ("Classic", "16 oz", 6.99),
        ("Grande", "32 oz", 12.99),
        ("Family", "50 oz", 19.99),
        ("Office", "5 Gallon", 24.99),
    ]:
        product = Product.add(name=name, size=size, price=price, stock=50)
        repo.add(product)
        products[name] = product
    return products
