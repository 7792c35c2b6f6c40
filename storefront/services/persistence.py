# storefront/services/persistence.py
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class KeyValueBackend(Protocol):
    def get(self, key: str) -> str | None: ...

    def put(self, key: str, raw: str) -> None: ...


class PersistenceSync:
    """
    Wspolny load/save dla wszystkich magazynow sklepu.
    load przy starcie (brak / zepsuty JSON -> wartosc domyslna, bez bledu),
    save po kazdej zmianie. Brak transakcji miedzy kluczami.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def load(self, key: str, adapter: TypeAdapter, default: Any) -> Any:
        raw = self.backend.get(key)
        if raw is None:
            return default

        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Stored value under '{key}' is unreadable, using default: {e.error_count()} error(s)")
            return default

    def save(self, key: str, adapter: TypeAdapter, value: Any) -> None:
        self.backend.put(key, adapter.dump_json(value).decode("utf-8"))
