# storefront/services/catalog_service.py
import threading
from typing import List

from pydantic import TypeAdapter

from storefront.domain.constants import (
    INITIAL_PRODUCTS,
    NEW_PRODUCT_BADGE,
    NEW_PRODUCT_IMAGE,
    PRODUCTS_KEY,
)
from storefront.domain.schemas import Product, ProductCreate
from storefront.services.persistence import PersistenceSync
from storefront.utils.ids import next_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_products = TypeAdapter(List[Product])


class CatalogService:
    """
    Katalog pakietow.
    commands (add, remove) zapisuja caly katalog,
    query (list, get) tylko odczyt
    """

    def __init__(self, persistence: PersistenceSync):
        self.persistence = persistence
        self._products: List[Product] = []
        self._lock = threading.Lock()

    def initialize(self) -> None:
        default = [p.model_copy() for p in INITIAL_PRODUCTS]
        self._products = self.persistence.load(PRODUCTS_KEY, _products, default)
        logger.info(f"Catalog loaded with {len(self._products)} products")

    #query
    def list_products(self) -> List[Product]:
        return list(self._products)

    def get_product(self, product_id: int) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    #commands
    def add_product(self, payload: ProductCreate) -> Product:
        with self._lock:
            product = Product(
                id=next_id(p.id for p in self._products),
                name=payload.name,
                amount=payload.amount,
                price=payload.price,
                image=payload.image or NEW_PRODUCT_IMAGE,
                badge=NEW_PRODUCT_BADGE,
            )
            self._products = [*self._products, product]
            self._save()

        logger.info(f"Product {product.id} '{product.name}' added to catalog")
        return product

    def remove_product(self, product_id: int) -> None:
        # brak id -> nic sie nie dzieje
        with self._lock:
            self._products = [p for p in self._products if p.id != product_id]
            self._save()
        logger.info(f"Product {product_id} removed from catalog")

    def _save(self) -> None:
        self.persistence.save(PRODUCTS_KEY, _products, self._products)
