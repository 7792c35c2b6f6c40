# storefront/api/routers/reviews.py
from typing import List

from fastapi import APIRouter, Depends

from storefront.api.deps import get_storefront
from storefront.domain.schemas import Review, ReviewIn
from storefront.services.session import StorefrontSession

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/", response_model=List[Review])
def list_reviews(sf: StorefrontSession = Depends(get_storefront)):
    return sf.reviews.list_reviews()


@router.post("/", response_model=Review, status_code=201)
def submit_review(payload: ReviewIn, sf: StorefrontSession = Depends(get_storefront)):
    return sf.reviews.submit_review(payload)
