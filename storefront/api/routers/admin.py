# storefront/api/routers/admin.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_storefront, require_admin
from storefront.domain.schemas import (
    AdminLogin,
    Product,
    ProductCreate,
    TicketList,
    TicketReply,
)
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login")
def login(payload: AdminLogin, sf: StorefrontSession = Depends(get_storefront)):
    try:
        sf.admin.login(payload.password)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return {"authenticated": True}


@router.post("/logout")
def logout(sf: StorefrontSession = Depends(get_storefront)):
    sf.admin.logout()
    return {"authenticated": False}


#katalog
@router.post("/products", response_model=Product, status_code=201)
def add_product(payload: ProductCreate, sf: StorefrontSession = Depends(require_admin)):
    return sf.catalog.add_product(payload)


@router.delete("/products/{product_id}", status_code=204)
def remove_product(product_id: int, sf: StorefrontSession = Depends(require_admin)):
    sf.catalog.remove_product(product_id)


#support
@router.get("/tickets", response_model=TicketList)
def list_tickets(sf: StorefrontSession = Depends(require_admin)):
    return TicketList(tickets=sf.support.list_tickets(), new_count=sf.support.new_count())


@router.post("/tickets/{ticket_id}/reply", response_model=TicketReply)
def reply_ticket(ticket_id: int, sf: StorefrontSession = Depends(require_admin)):
    try:
        ticket = sf.support.mark_replied(ticket_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TicketReply(ticket=ticket, reply_url=f"mailto:{ticket.contact}")


@router.delete("/tickets/{ticket_id}", status_code=204)
def delete_ticket(ticket_id: int, sf: StorefrontSession = Depends(require_admin)):
    sf.support.delete_ticket(ticket_id)
