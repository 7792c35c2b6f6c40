from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.domain.schemas import ProductCreate
from storefront.services.catalog_service import CatalogService


def test_add_product(storefront, persistence):
    product = storefront.catalog.add_product(
        ProductCreate(name="Mini Pack", amount=50, price=Decimal("49"))
    )

    assert product.badge == "НОВИНКА"
    assert product.image
    assert storefront.catalog.list_products()[-1] == product

    reloaded = CatalogService(persistence)
    reloaded.initialize()
    assert reloaded.get_product(product.id) == product


def test_ids_unique_for_back_to_back_adds(storefront):
    a = storefront.catalog.add_product(ProductCreate(name="A", amount=1, price=1))
    b = storefront.catalog.add_product(ProductCreate(name="B", amount=1, price=1))
    assert a.id != b.id


def test_remove_is_idempotent(storefront):
    storefront.catalog.remove_product(1)
    storefront.catalog.remove_product(1)
    assert storefront.catalog.get_product(1) is None
    assert len(storefront.catalog.list_products()) == 5


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "X", "amount": "lots", "price": 10},
        {"name": "X", "amount": 10, "price": "abc"},
        {"name": "X", "amount": 0, "price": 10},
        {"name": "", "amount": 10, "price": 10},
        {"name": "X", "amount": 10, "price": -1},
    ],
)
def test_malformed_product_input_rejected(fields):
    with pytest.raises(ValidationError):
        ProductCreate(**fields)
