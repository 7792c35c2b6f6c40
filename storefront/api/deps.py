# storefront/api/deps.py
from fastapi import Depends, HTTPException, Request

from storefront.services.session import StorefrontSession


def get_storefront(request: Request) -> StorefrontSession:
    return request.app.state.storefront


def require_admin(sf: StorefrontSession = Depends(get_storefront)) -> StorefrontSession:
    try:
        sf.admin.require()
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return sf
