# storefront/services/notification_service.py
import requests
from requests import RequestException

from storefront.utils.retry import http_retry
from storefront.utils.settings import (
    NOTIFY_RETRY_ATTEMPTS,
    NOTIFY_TIMEOUT_SECONDS,
    TELEGRAM_API_URL,
    TELEGRAM_BOT_TOKEN,
    TELEGRAM_CHAT_ID,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationError(RuntimeError):
    """Webhook nie przyjal wiadomosci (siec albo odpowiedz != OK)."""


class TelegramNotifier:
    """
    Wysyla powiadomienia (zamowienia, support) do czatu admina przez Bot API.
    Jeden POST na wiadomosc, bez klucza idempotencji.
    """

    def __init__(
        self,
        token: str | None = None,
        chat_id: str | None = None,
        base_url: str | None = None,
        timeout: float = NOTIFY_TIMEOUT_SECONDS,
        attempts: int = NOTIFY_RETRY_ATTEMPTS,
    ):
        self.token = token if token is not None else TELEGRAM_BOT_TOKEN
        self.chat_id = chat_id if chat_id is not None else TELEGRAM_CHAT_ID
        self.base_url = (base_url or TELEGRAM_API_URL).rstrip("/")
        self.timeout = timeout
        self._post = http_retry(attempts)(self._post_once)

    @property
    def url(self) -> str:
        return f"{self.base_url}/bot{self.token}/sendMessage"

    def _post_once(self, payload: dict) -> requests.Response:
        return requests.post(self.url, json=payload, timeout=self.timeout)

    def send(self, text: str) -> None:
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "HTML",
        }

        try:
            resp = self._post(payload)
        except RequestException as e:
            logger.error(f"Notification request failed: {e}")
            raise NotificationError("Notification endpoint unreachable") from e

        if not resp.ok:
            logger.error(f"Notification rejected with HTTP {resp.status_code}")
            raise NotificationError(f"Notification endpoint returned {resp.status_code}")

        logger.info(f"Notification delivered to chat {self.chat_id}")
