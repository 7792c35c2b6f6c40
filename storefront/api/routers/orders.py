# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_storefront
from storefront.domain.schemas import OrderIn, OrderReceipt
from storefront.services.notification_service import NotificationError
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderReceipt, status_code=201)
def create_order(payload: OrderIn, sf: StorefrontSession = Depends(get_storefront)):
    """
    Wysyla zamowienie do admina i czysci koszyk.
    Blad wysylki -> 502, koszyk zostaje.
    """
    try:
        return sf.orders.submit(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotificationError as e:
        raise HTTPException(status_code=502, detail=str(e))
