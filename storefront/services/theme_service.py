# storefront/services/theme_service.py
import threading

from pydantic import TypeAdapter

from storefront.domain.constants import DEFAULT_THEME, THEME_KEY
from storefront.domain.schemas import ThemeType
from storefront.services.persistence import PersistenceSync
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_theme = TypeAdapter(ThemeType)


class ThemeService:
    """Motyw (dark/light) wspolny dla calej sesji, zapisywany przy kazdej zmianie."""

    def __init__(self, persistence: PersistenceSync):
        self.persistence = persistence
        self._theme: ThemeType = DEFAULT_THEME
        self._lock = threading.Lock()

    def initialize(self) -> None:
        self._theme = self.persistence.load(THEME_KEY, _theme, DEFAULT_THEME)

    def current(self) -> ThemeType:
        return self._theme

    def toggle(self) -> ThemeType:
        with self._lock:
            previous = self._theme
            self._theme = "light" if previous == "dark" else "dark"
            self.persistence.save(THEME_KEY, _theme, self._theme)
            current = self._theme

        logger.info(f"Theme switched {previous} -> {current}")
        return current
