# storefront/domain/constants.py
from decimal import Decimal

from storefront.domain.schemas import Product

# klucze w magazynie klucz-wartosc
THEME_KEY = "theme"
CART_KEY = "cart"
PRODUCTS_KEY = "products"
SUPPORT_KEY = "messages_support"
REVIEWS_KEY = "reviews_all"

PROMO_CODES: dict[str, int] = {
    "GIFT10": 10,
    "SO2GOLD": 15,
    "ADMIN": 50,
}

BONUS_GOAL = Decimal("5000")
BONUS_REWARD = "+500G"

# rabat za duze zamowienie (strona zamowienia)
VOLUME_DISCOUNT_THRESHOLD = Decimal("10000")
VOLUME_DISCOUNT_PERCENT = 10

NEW_PRODUCT_BADGE = "НОВИНКА"
NEW_PRODUCT_IMAGE = "https://images.unsplash.com/photo-1595152433602-0da764f69324?w=400"
REVIEW_DATE_LABEL = "Сегодня"
DEFAULT_THEME = "dark"

_IMG = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&q=80&w=400"

INITIAL_PRODUCTS: list[Product] = [
    Product(id=1, name="Starter Pack", amount=100, price=Decimal("89"),
            image=_IMG.format("1595152433602-0da764f69324"), badge="Новичкам"),
    Product(id=2, name="Guerilla Gold", amount=500, price=Decimal("429"),
            image=_IMG.format("1614850523459-c2f4c699c52e"), badge="ХИТ"),
    Product(id=3, name="Special Ops", amount=1000, price=Decimal("799"),
            image=_IMG.format("1533035353720-f1c6a75cd8ab"), badge="-10% СКИДКА"),
    Product(id=4, name="Veteran Cache", amount=2500, price=Decimal("1899"),
            image=_IMG.format("1518544830919-094119864703"), badge="ВЫГОДНО"),
    Product(id=5, name="Legendary Loot", amount=5000, price=Decimal("3499"),
            image=_IMG.format("1589410182470-3d779b5c234a"), badge="VIP"),
    Product(id=6, name="CHLENHUNTER MMEGA", amount=15000, price=Decimal("8999"),
            image=_IMG.format("1579621970563-ebec7560ff3e"), badge="МАКСИМУМ"),
]
