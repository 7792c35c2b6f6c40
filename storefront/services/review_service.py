# storefront/services/review_service.py
import threading
from typing import List

from pydantic import TypeAdapter

from storefront.domain.constants import REVIEW_DATE_LABEL, REVIEWS_KEY
from storefront.domain.schemas import Review, ReviewIn
from storefront.services.persistence import PersistenceSync
from storefront.utils.ids import next_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_reviews = TypeAdapter(List[Review])


class ReviewService:
    """Tablica opinii, najnowsze na gorze. Bez edycji i usuwania."""

    def __init__(self, persistence: PersistenceSync):
        self.persistence = persistence
        self._reviews: List[Review] = []
        self._lock = threading.Lock()

    def initialize(self) -> None:
        self._reviews = self.persistence.load(REVIEWS_KEY, _reviews, [])

    def list_reviews(self) -> List[Review]:
        return list(self._reviews)

    def submit_review(self, payload: ReviewIn) -> Review:
        with self._lock:
            review = Review(
                id=next_id(r.id for r in self._reviews),
                user=payload.user,
                text=payload.text,
                rating=payload.rating,
                date=REVIEW_DATE_LABEL,
            )
            self._reviews = [review, *self._reviews]
            self.persistence.save(REVIEWS_KEY, _reviews, self._reviews)

        logger.info(f"Review {review.id} published ({review.rating}/5)")
        return review
