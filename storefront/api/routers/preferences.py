# storefront/api/routers/preferences.py
from fastapi import APIRouter, Depends

from storefront.api.deps import get_storefront
from storefront.domain.schemas import ThemeOut
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/theme", response_model=ThemeOut)
def get_theme(sf: StorefrontSession = Depends(get_storefront)):
    return ThemeOut(theme=sf.theme.current())


@router.post("/theme/toggle", response_model=ThemeOut)
def toggle_theme(sf: StorefrontSession = Depends(get_storefront)):
    return ThemeOut(theme=sf.theme.toggle())
