# storefront/services/support_service.py
import threading
from datetime import datetime
from html import escape
from typing import List

from pydantic import TypeAdapter

from storefront.domain.constants import SUPPORT_KEY
from storefront.domain.schemas import SupportMessage, TicketIn
from storefront.services.notification_service import TelegramNotifier
from storefront.services.persistence import PersistenceSync
from storefront.utils.ids import next_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_tickets = TypeAdapter(List[SupportMessage])


def format_ticket_message(payload: TicketIn) -> str:
    return (
        "<b>🆘 ПОДДЕРЖКА</b>\n\n"
        f"👤 Контакт: {escape(payload.contact)}\n"
        f"💬 Текст: {escape(payload.text)}"
    )


class SupportService:
    def __init__(self, persistence: PersistenceSync, notifier: TelegramNotifier):
        self.persistence = persistence
        self.notifier = notifier
        self._tickets: List[SupportMessage] = []
        self._lock = threading.Lock()

    def initialize(self) -> None:
        self._tickets = self.persistence.load(SUPPORT_KEY, _tickets, [])

    def list_tickets(self) -> List[SupportMessage]:
        return list(self._tickets)

    def new_count(self) -> int:
        return sum(1 for t in self._tickets if t.status == "new")

    def submit_ticket(self, payload: TicketIn) -> SupportMessage:
        # najpierw wysylka (poza lockiem), zapis tylko gdy sie udala
        self.notifier.send(format_ticket_message(payload))

        with self._lock:
            ticket = SupportMessage(
                id=next_id(t.id for t in self._tickets),
                contact=payload.contact,
                text=payload.text,
                date=datetime.now().strftime("%d.%m.%Y, %H:%M:%S"),
                status="new",
            )
            self._tickets = [ticket, *self._tickets]
            self._save()

        logger.info(f"Support ticket {ticket.id} recorded")
        return ticket

    def mark_replied(self, ticket_id: int) -> SupportMessage:
        with self._lock:
            ticket = next((t for t in self._tickets if t.id == ticket_id), None)
            if not ticket:
                raise ValueError("Ticket not found")

            replied = ticket.model_copy(update={"status": "replied"})
            self._tickets = [replied if t.id == ticket_id else t for t in self._tickets]
            self._save()

        logger.info(f"Support ticket {ticket_id} marked as replied")
        return replied

    def delete_ticket(self, ticket_id: int) -> None:
        with self._lock:
            self._tickets = [t for t in self._tickets if t.id != ticket_id]
            self._save()
        logger.info(f"Support ticket {ticket_id} deleted")

    def _save(self) -> None:
        self.persistence.save(SUPPORT_KEY, _tickets, self._tickets)
