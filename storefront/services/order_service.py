# storefront/services/order_service.py
from dataclasses import dataclass
from decimal import Decimal
from html import escape
from typing import List

from storefront.domain.schemas import CartItem, CartSummary, OrderIn, OrderReceipt
from storefront.services.cart_service import CartService
from storefront.services.notification_service import TelegramNotifier
from storefront.services.pricing import (
    PromoEngine,
    bonus_progress,
    effective_discount,
    final_total,
    round_currency,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Quote:
    subtotal: Decimal
    discount_percent: int
    total: Decimal

    @property
    def rounded_total(self) -> int:
        return round_currency(self.total)

    @property
    def discount_amount(self) -> int:
        return round_currency(self.subtotal - self.total)


def quote(cart: CartService, promo: PromoEngine) -> Quote:
    subtotal = cart.subtotal()
    percent = effective_discount(subtotal, promo.discount_percent)
    return Quote(subtotal=subtotal, discount_percent=percent, total=final_total(subtotal, percent))


def cart_summary(cart: CartService, promo: PromoEngine) -> CartSummary:
    q = quote(cart, promo)
    return CartSummary(
        items=cart.items(),
        item_count=cart.item_count(),
        subtotal=q.subtotal,
        applied_code=promo.applied_code,
        discount_percent=q.discount_percent,
        discount_amount=q.discount_amount,
        total=q.rounded_total,
        bonus=bonus_progress(q.subtotal),
    )


def format_order_message(payload: OrderIn, items: List[CartItem], total: int) -> str:
    lines = "\n".join(f"{escape(i.name)} (x{i.quantity})" for i in items)
    return (
        "<b>💰 НОВЫЙ ЗАКАЗ!</b>\n\n"
        f"👤 ID: <code>{escape(payload.buyer_id)}</code>\n"
        f"📧 Email: {escape(payload.email)}\n"
        f"💳 Метод: {escape(payload.payment_method)}\n"
        f"🛒 Товары:\n{lines}\n"
        f"💵 СУММА: {total} ₽"
    )


class OrderService:
    """
    Skladanie zamowienia z koszyka.

    1. Liczy total (ta sama regula rabatu co koszyk)
    2. Wysyla wiadomosc do admina
    3. Dopiero po sukcesie czysci koszyk i kod promocyjny
    """

    def __init__(self, cart: CartService, promo: PromoEngine, notifier: TelegramNotifier):
        self.cart = cart
        self.promo = promo
        self.notifier = notifier

    def submit(self, payload: OrderIn) -> OrderReceipt:
        if self.cart.is_empty():
            raise ValueError("Cart is empty")

        items = self.cart.items()
        q = quote(self.cart, self.promo)

        logger.info(
            f"Submitting order for buyer {payload.buyer_id}: {len(items)} line(s), "
            f"total {q.rounded_total} (-{q.discount_percent}%)"
        )

        # NotificationError leci dalej, koszyk zostaje nietkniety
        self.notifier.send(format_order_message(payload, items, q.rounded_total))

        self.cart.clear()
        self.promo.reset()

        logger.info(f"Order for buyer {payload.buyer_id} accepted")

        return OrderReceipt(
            buyer_id=payload.buyer_id,
            email=payload.email,
            payment_method=payload.payment_method,
            items=items,
            subtotal=q.subtotal,
            discount_percent=q.discount_percent,
            total=q.rounded_total,
        )
