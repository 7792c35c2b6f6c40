import logging
from typing import List

from pydantic import TypeAdapter

from storefront.domain.constants import CART_KEY, PRODUCTS_KEY, REVIEWS_KEY
from storefront.domain.schemas import Product, ReviewIn
from storefront.services.notification_service import TelegramNotifier
from storefront.services.session import build_session

_products = TypeAdapter(List[Product])


def test_load_returns_default_when_key_missing(persistence):
    assert persistence.load(PRODUCTS_KEY, _products, ["fallback"]) == ["fallback"]


def test_load_falls_back_on_broken_json(kv_repo, persistence):
    kv_repo.put(PRODUCTS_KEY, "{not json")
    assert persistence.load(PRODUCTS_KEY, _products, []) == []


def test_load_falls_back_on_wrong_shape(kv_repo, persistence):
    kv_repo.put(PRODUCTS_KEY, '[{"id": "x"}]')
    assert persistence.load(PRODUCTS_KEY, _products, []) == []


def test_save_overwrites_previous_value(kv_repo, persistence):
    persistence.save(CART_KEY, TypeAdapter(List[int]), [1, 2])
    persistence.save(CART_KEY, TypeAdapter(List[int]), [3])
    assert kv_repo.get(CART_KEY) == "[3]"


def test_fresh_storage_seeds_default_catalog(storefront):
    products = storefront.catalog.list_products()
    assert [p.id for p in products] == [1, 2, 3, 4, 5, 6]
    assert storefront.cart.items() == []
    assert storefront.theme.current() == "dark"


def test_state_survives_reload(kv_repo, storefront, notifier):
    storefront.cart.add_to_cart(storefront.catalog.get_product(2))
    storefront.catalog.remove_product(6)
    storefront.reviews.submit_review(ReviewIn(user="a", text="first", rating=4))
    storefront.reviews.submit_review(ReviewIn(user="b", text="second", rating=5))
    storefront.theme.toggle()

    reloaded = build_session(kv_repo, notifier)

    assert [i.id for i in reloaded.cart.items()] == [2]
    assert 6 not in [p.id for p in reloaded.catalog.list_products()]
    assert [r.text for r in reloaded.reviews.list_reviews()] == ["second", "first"]
    assert reloaded.theme.current() == "light"


def test_promo_is_not_persisted(kv_repo, storefront, notifier):
    storefront.promo.apply("GIFT10")
    reloaded = build_session(kv_repo, notifier)
    assert reloaded.promo.applied_code is None
    assert reloaded.promo.discount_percent == 0


def test_unreadable_reviews_do_not_break_startup(kv_repo):
    kv_repo.put(REVIEWS_KEY, "garbage")
    session = build_session(kv_repo, TelegramNotifier(token="t", chat_id="1"))
    assert session.reviews.list_reviews() == []


def test_default_catalog_literal_names(storefront):
    names = [p.name for p in storefront.catalog.list_products()]
    assert names == [
        "Starter Pack",
        "Guerilla Gold",
        "Special Ops",
        "Veteran Cache",
        "Legendary Loot",
        "CHLENHUNTER MMEGA",
    ]


def test_theme_toggle_is_logged(storefront, caplog):
    with caplog.at_level(logging.INFO, logger="storefront.services.theme_service"):
        storefront.theme.toggle()

    assert "Theme switched dark -> light" in caplog.text
