# storefront/api/routers/catalog.py
from typing import List

from fastapi import APIRouter, Depends

from storefront.api.deps import get_storefront
from storefront.domain.schemas import Product
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/products", tags=["catalog"])


@router.get("/", response_model=List[Product])
def list_products(sf: StorefrontSession = Depends(get_storefront)):
    return sf.catalog.list_products()
