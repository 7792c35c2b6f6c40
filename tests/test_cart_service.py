from decimal import Decimal

import pytest

from storefront.domain.constants import INITIAL_PRODUCTS
from storefront.domain.schemas import Product
from storefront.services.cart_service import CartService


@pytest.fixture
def cart(persistence):
    svc = CartService(persistence)
    svc.initialize()
    return svc


def _product(pid, price, name="Pack"):
    return Product(id=pid, name=name, amount=100, price=Decimal(price), image="img")


def test_repeated_add_keeps_one_line(cart):
    p = INITIAL_PRODUCTS[0]
    for _ in range(4):
        cart.add_to_cart(p)

    items = cart.items()
    assert len(items) == 1
    assert items[0].id == p.id
    assert items[0].quantity == 4


def test_update_quantity_never_below_one(cart):
    p = _product(10, "50")
    cart.add_to_cart(p)
    cart.update_quantity(10, 3)
    assert cart.items()[0].quantity == 4

    cart.update_quantity(10, -100)
    assert cart.items()[0].quantity == 1

    cart.update_quantity(10, -1)
    assert cart.items()[0].quantity == 1


def test_remove_deletes_whole_line(cart):
    p = _product(10, "50")
    cart.add_to_cart(p)
    cart.add_to_cart(p)
    cart.remove_from_cart(10)
    assert cart.is_empty()


def test_remove_unknown_id_is_noop(cart):
    cart.add_to_cart(_product(10, "50"))
    before = cart.items()
    cart.remove_from_cart(999)
    assert cart.items() == before


def test_subtotal(cart):
    cart.add_to_cart(_product(1, "89"))
    cart.add_to_cart(_product(1, "89"))
    cart.add_to_cart(_product(2, "429.50"))
    assert cart.subtotal() == Decimal("607.50")
    assert cart.item_count() == 3


def test_zero_price_item_does_not_change_subtotal(cart):
    cart.add_to_cart(_product(1, "19.99"))
    before = cart.subtotal()
    cart.add_to_cart(_product(2, "0"))
    assert cart.subtotal() == before


def test_clear_persists_empty_cart(cart, persistence):
    cart.add_to_cart(_product(1, "10"))
    cart.clear()

    reloaded = CartService(persistence)
    reloaded.initialize()
    assert reloaded.is_empty()
