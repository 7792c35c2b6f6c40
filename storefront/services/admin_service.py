# storefront/services/admin_service.py
from storefront.utils.settings import ADMIN_PASSWORD
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AdminGate:
    """
    Wspolne haslo do panelu admina. Flaga w pamieci do konca sesji,
    bez tokenow, wygasania i blokady po bledach.
    """

    def __init__(self, password: str = ADMIN_PASSWORD):
        self._password = password
        self.is_authenticated = False

    def login(self, password: str) -> None:
        if password != self._password:
            logger.warning("Admin login rejected")
            raise PermissionError("Wrong admin password")

        self.is_authenticated = True
        logger.info("Admin logged in")

    def logout(self) -> None:
        self.is_authenticated = False

    def require(self) -> None:
        if not self.is_authenticated:
            raise PermissionError("Admin login required")
