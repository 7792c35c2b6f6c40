# storefront/api/__init__.py
from fastapi import APIRouter

from storefront.api.routers import admin, cart, catalog, health, orders, preferences, reviews, support

api_router = APIRouter()
for _r in (health, catalog, cart, orders, support, reviews, preferences, admin):
    api_router.include_router(_r.router)
