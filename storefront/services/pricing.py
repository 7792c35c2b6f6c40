# storefront/services/pricing.py
from decimal import Decimal, ROUND_HALF_UP

from storefront.domain.constants import (
    BONUS_GOAL,
    BONUS_REWARD,
    PROMO_CODES,
    VOLUME_DISCOUNT_PERCENT,
    VOLUME_DISCOUNT_THRESHOLD,
)
from storefront.domain.schemas import BonusProgress, PromoResult
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_HUNDRED = Decimal("100")


def round_currency(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def final_total(subtotal: Decimal, discount_percent: int) -> Decimal:
    return subtotal * (1 - Decimal(discount_percent) / _HUNDRED)


def effective_discount(subtotal: Decimal, promo_percent: int) -> int:
    """
    Jedna regula rabatu dla koszyka i zamowienia:
    wiekszy z (kod promocyjny, 10% przy subtotal > 10000). Bez sumowania.
    """
    volume = VOLUME_DISCOUNT_PERCENT if subtotal > VOLUME_DISCOUNT_THRESHOLD else 0
    return max(promo_percent, volume)


def bonus_progress(subtotal: Decimal, goal: Decimal = BONUS_GOAL) -> BonusProgress:
    progress = min(subtotal / goal * _HUNDRED, _HUNDRED)
    return BonusProgress(
        goal=goal,
        progress=progress,
        remaining=max(goal - subtotal, Decimal("0")),
        unlocked=progress >= _HUNDRED,
        reward=BONUS_REWARD,
    )


class PromoEngine:
    """Kod promocyjny sesji. Tylko w pamieci, nowy kod zastepuje poprzedni."""

    def __init__(self, codes: dict[str, int] | None = None):
        self.codes = codes if codes is not None else PROMO_CODES
        self.applied_code: str | None = None
        self.discount_percent = 0

    def apply(self, code: str) -> PromoResult:
        clean = code.strip().upper()
        percent = self.codes.get(clean)

        if percent is None:
            logger.info(f"Promo code '{clean}' not found")
            return PromoResult(code=clean, found=False)

        self.applied_code = clean
        self.discount_percent = percent
        logger.info(f"Promo code {clean} applied (-{percent}%)")
        return PromoResult(code=clean, found=True, discount_percent=percent)

    def reset(self) -> None:
        self.applied_code = None
        self.discount_percent = 0
