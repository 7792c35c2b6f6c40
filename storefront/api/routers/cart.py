#storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_storefront
from storefront.domain.schemas import (
    CartItemIn,
    CartSummary,
    PromoIn,
    PromoResult,
    QuantityDelta,
)
from storefront.services.order_service import cart_summary
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("/", response_model=CartSummary)
def get_cart(sf: StorefrontSession = Depends(get_storefront)):
    return cart_summary(sf.cart, sf.promo)


@router.post("/items", response_model=CartSummary)
def add_item(payload: CartItemIn, sf: StorefrontSession = Depends(get_storefront)):
    product = sf.catalog.get_product(payload.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    sf.cart.add_to_cart(product)
    return cart_summary(sf.cart, sf.promo)


@router.patch("/items/{product_id}", response_model=CartSummary)
def update_item(
    product_id: int,
    payload: QuantityDelta,
    sf: StorefrontSession = Depends(get_storefront),
):
    sf.cart.update_quantity(product_id, payload.delta)
    return cart_summary(sf.cart, sf.promo)


@router.delete("/items/{product_id}", response_model=CartSummary)
def remove_item(product_id: int, sf: StorefrontSession = Depends(get_storefront)):
    sf.cart.remove_from_cart(product_id)
    return cart_summary(sf.cart, sf.promo)


@router.post("/promo", response_model=PromoResult)
def apply_promo(payload: PromoIn, sf: StorefrontSession = Depends(get_storefront)):
    result = sf.promo.apply(payload.code)
    if not result.found:
        raise HTTPException(status_code=404, detail="Promo code not found")
    return result
