# storefront/services/session.py
from dataclasses import dataclass

from storefront.services.admin_service import AdminGate
from storefront.services.cart_service import CartService
from storefront.services.catalog_service import CatalogService
from storefront.services.notification_service import TelegramNotifier
from storefront.services.order_service import OrderService
from storefront.services.persistence import KeyValueBackend, PersistenceSync
from storefront.services.pricing import PromoEngine
from storefront.services.review_service import ReviewService
from storefront.services.support_service import SupportService
from storefront.services.theme_service import ThemeService
from storefront.utils.settings import ADMIN_PASSWORD, STORAGE_BACKEND
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class StorefrontSession:
    """Caly stan sklepu jednej sesji, przekazywany jawnie do endpointow."""

    catalog: CatalogService
    cart: CartService
    promo: PromoEngine
    orders: OrderService
    support: SupportService
    reviews: ReviewService
    theme: ThemeService
    admin: AdminGate


def build_session(
    backend: KeyValueBackend,
    notifier: TelegramNotifier,
    admin_password: str = ADMIN_PASSWORD,
) -> StorefrontSession:
    persistence = PersistenceSync(backend)

    catalog = CatalogService(persistence)
    cart = CartService(persistence)
    support = SupportService(persistence, notifier)
    reviews = ReviewService(persistence)
    theme = ThemeService(persistence)

    # kazdy magazyn czyta swoj klucz raz, przy starcie
    for store in (catalog, cart, support, reviews, theme):
        store.initialize()

    promo = PromoEngine()
    return StorefrontSession(
        catalog=catalog,
        cart=cart,
        promo=promo,
        orders=OrderService(cart, promo, notifier),
        support=support,
        reviews=reviews,
        theme=theme,
        admin=AdminGate(admin_password),
    )


def default_backend(storage: str = STORAGE_BACKEND) -> KeyValueBackend:
    if storage == "redis":
        from storefront.repos.redis_kv_repo import RedisKeyValueRepo

        logger.info("Using Redis key-value storage")
        return RedisKeyValueRepo()

    from storefront.data.database import SessionLocal, init_db
    from storefront.repos.kv_repo import KeyValueRepo

    init_db()
    logger.info("Using SQL key-value storage")
    return KeyValueRepo(SessionLocal)
