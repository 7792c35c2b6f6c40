# storefront/services/cart_service.py
import threading
from decimal import Decimal
from typing import List

from pydantic import TypeAdapter

from storefront.domain.constants import CART_KEY
from storefront.domain.schemas import CartItem, Product
from storefront.services.persistence import PersistenceSync
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_cart = TypeAdapter(List[CartItem])


class CartService:
    """
    Koszyk sesji. Jedna pozycja na produkt (po id),
    ilosc nigdy nie spada ponizej 1, usuniecie kasuje cala pozycje.
    Kazda zmiana od razu zapisywana.
    """

    def __init__(self, persistence: PersistenceSync):
        self.persistence = persistence
        self._items: List[CartItem] = []
        # endpointy sync chodza w threadpoolu: zmiana + zapis pod jednym lockiem
        self._lock = threading.Lock()

    def initialize(self) -> None:
        self._items = self.persistence.load(CART_KEY, _cart, [])
        logger.info(f"Cart restored with {len(self._items)} line(s)")

    #query
    def items(self) -> List[CartItem]:
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def item_count(self) -> int:
        return sum(i.quantity for i in self._items)

    def subtotal(self) -> Decimal:
        return sum((i.price * i.quantity for i in self._items), Decimal("0"))

    #commands
    def add_to_cart(self, product: Product) -> CartItem:
        with self._lock:
            existing = next((i for i in self._items if i.id == product.id), None)

            if existing:
                updated = existing.model_copy(update={"quantity": existing.quantity + 1})
                self._items = [updated if i.id == product.id else i for i in self._items]
                logger.info(
                    f"Product {product.id} already in cart, quantity "
                    f"{existing.quantity} -> {updated.quantity}"
                )
            else:
                updated = CartItem(**product.model_dump(), quantity=1)
                self._items = [*self._items, updated]
                logger.info(f"Product {product.id} added to cart")

            self._save()
        return updated

    def remove_from_cart(self, product_id: int) -> None:
        with self._lock:
            self._items = [i for i in self._items if i.id != product_id]
            self._save()
        logger.info(f"Product {product_id} removed from cart")

    def update_quantity(self, product_id: int, delta: int) -> None:
        with self._lock:
            self._items = [
                i.model_copy(update={"quantity": max(1, i.quantity + delta)}) if i.id == product_id else i
                for i in self._items
            ]
            self._save()

    def clear(self) -> None:
        with self._lock:
            self._items = []
            self._save()
        logger.info("Cart cleared")

    def _save(self) -> None:
        self.persistence.save(CART_KEY, _cart, self._items)
