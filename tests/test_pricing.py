from decimal import Decimal

from storefront.services.pricing import (
    PromoEngine,
    bonus_progress,
    effective_discount,
    final_total,
    round_currency,
)


def test_known_code_gives_discount():
    promo = PromoEngine()
    result = promo.apply("gift10 ")

    assert result.found
    assert result.code == "GIFT10"
    assert result.discount_percent == 10
    assert final_total(Decimal("1000"), promo.discount_percent) == Decimal("900")


def test_unknown_code_keeps_state():
    promo = PromoEngine()
    promo.apply("GIFT10")

    result = promo.apply("NOPE")

    assert not result.found
    assert promo.applied_code == "GIFT10"
    assert promo.discount_percent == 10


def test_unknown_code_on_fresh_engine():
    promo = PromoEngine()
    assert not promo.apply("NOPE").found
    assert promo.discount_percent == 0


def test_second_code_replaces_first():
    promo = PromoEngine()
    promo.apply("GIFT10")
    promo.apply("SO2GOLD")

    assert promo.applied_code == "SO2GOLD"
    assert final_total(Decimal("1000"), promo.discount_percent) == Decimal("850")


def test_reset():
    promo = PromoEngine()
    promo.apply("ADMIN")
    promo.reset()
    assert promo.applied_code is None
    assert promo.discount_percent == 0


def test_bonus_progress_half_and_clamped():
    assert bonus_progress(Decimal("2500")).progress == 50
    full = bonus_progress(Decimal("6000"))
    assert full.progress == 100
    assert full.unlocked
    assert full.remaining == 0


def test_bonus_remaining():
    bp = bonus_progress(Decimal("1200"))
    assert not bp.unlocked
    assert bp.remaining == Decimal("3800")


def test_rounding_half_up():
    assert round_currency(Decimal("89.5")) == 90
    assert round_currency(Decimal("89.49")) == 89


def test_effective_discount_takes_larger_rule():
    assert effective_discount(Decimal("1000"), 0) == 0
    assert effective_discount(Decimal("12000"), 0) == 10
    assert effective_discount(Decimal("12000"), 15) == 15
    assert effective_discount(Decimal("10000"), 0) == 0
