"""Review form and review card controllers"""

import logging
from typing import Callable, Optional

from ...exceptions import ApiError
from ...shared.ui import Notifier, ViewController
from ..bookings.schemas import Booking
from .api import ReviewsAPI
from .schemas import CATEGORY_LABELS, Review, ReviewCategories, ReviewCreate

logger = logging.getLogger(__name__)


class ReviewForm(ViewController):
    """Review of a completed stay"""

    def __init__(
        self,
        booking: Booking,
        reviews_api: ReviewsAPI,
        on_submit: Optional[Callable[[Review], None]] = None,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify)
        self.booking = booking
        self.reviews_api = reviews_api
        self.on_submit = on_submit
        self.title = ""
        self.comment = ""
        self.categories = ReviewCategories()
        self.errors: dict[str, str] = {}
        self.submitting = False

    def set_category(self, category: str, rating: int) -> None:
        if category not in CATEGORY_LABELS:
            raise ValueError(f"Unknown review category: {category}")
        self.categories = self.categories.model_copy(update={category: max(1, min(5, rating))})

    def validate(self) -> bool:
        errors = {}

        if not self.title.strip():
            errors["title"] = "Review title is required"
        elif len(self.title) < 5:
            errors["title"] = "Title must be at least 5 characters"

        if not self.comment.strip():
            errors["comment"] = "Review comment is required"
        elif len(self.comment) < 10:
            errors["comment"] = "Comment must be at least 10 characters"

        self.errors = errors
        return not errors

    async def submit(self) -> Optional[Review]:
        if self.submitting or not self.validate():
            return None

        self.submitting = True
        try:
            review = await self.reviews_api.create_review(
                ReviewCreate(
                    bookingId=self.booking.id,
                    title=self.title,
                    comment=self.comment,
                    categories=self.categories,
                )
            )
        except ApiError as e:
            if self.mounted:
                self.notify.error(e.user_message("Failed to submit review"))
            return None
        finally:
            self.submitting = False

        if not self.mounted:
            return None

        self.notify.success("Review submitted successfully!")
        if self.on_submit:
            self.on_submit(review)
        return review


class ReviewCard(ViewController):
    """Helpful-vote toggle for one review"""

    def __init__(
        self,
        review: Review,
        reviews_api: ReviewsAPI,
        user_id: Optional[str] = None,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify)
        self.review = review
        self.reviews_api = reviews_api
        self.is_helpful = review.is_helpful_to(user_id)
        self.helpful_count = review.helpful_count

    async def toggle_helpful(self) -> None:
        try:
            count = await self.reviews_api.mark_helpful(self.review.id)
        except ApiError as e:
            logger.error(f"❌ Mark helpful failed for review {self.review.id}: {e}")
            if self.mounted:
                self.notify.error("Failed to update helpful status")
            return

        if self.mounted:
            self.helpful_count = count
            self.is_helpful = not self.is_helpful
