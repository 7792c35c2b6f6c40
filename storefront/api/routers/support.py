# storefront/api/routers/support.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_storefront
from storefront.domain.schemas import SupportMessage, TicketIn
from storefront.services.notification_service import NotificationError
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/support", tags=["support"])


@router.post("/", response_model=SupportMessage, status_code=201)
def submit_ticket(payload: TicketIn, sf: StorefrontSession = Depends(get_storefront)):
    try:
        return sf.support.submit_ticket(payload)
    except NotificationError as e:
        raise HTTPException(status_code=502, detail=str(e))
