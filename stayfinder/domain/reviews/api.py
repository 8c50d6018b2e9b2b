"""Reviews API"""

import logging

from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list, parse_model
from .schemas import Review, ReviewCreate, ReviewStats

logger = logging.getLogger(__name__)


class ReviewsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_reviews(self, listing_id: str) -> list[Review]:
        body = await self.client.get(f"/reviews/listing/{listing_id}")
        data = unwrap_data(body, [])
        # Reviews whose author account was deleted come back with user=null
        if isinstance(data, list):
            data = [review for review in data if isinstance(review, dict) and review.get("user")]
        return parse_list(Review, data)

    async def create_review(self, review: ReviewCreate) -> Review:
        body = await self.client.post("/reviews", json=review.model_dump())
        created = parse_model(Review, unwrap_data(body))
        logger.info(f"✅ Review created for booking {review.bookingId}")
        return created

    async def update_review(self, review_id: str, review_data: dict) -> Review:
        body = await self.client.put(f"/reviews/{review_id}", json=review_data)
        return parse_model(Review, unwrap_data(body))

    async def delete_review(self, review_id: str) -> None:
        await self.client.delete(f"/reviews/{review_id}")

    async def get_my_reviews(self) -> list[Review]:
        body = await self.client.get("/reviews/my-reviews")
        return parse_list(Review, unwrap_data(body, []))

    async def mark_helpful(self, review_id: str) -> int:
        """Toggle the helpful vote; returns the new vote count"""
        body = await self.client.post(f"/reviews/{review_id}/helpful")
        data = unwrap_data(body, {})
        helpful = data.get("helpful", 0) if isinstance(data, dict) else 0
        return len(helpful) if isinstance(helpful, list) else int(helpful)

    async def get_review_stats(self, listing_id: str) -> ReviewStats:
        body = await self.client.get(f"/reviews/stats/{listing_id}")
        return parse_model(ReviewStats, unwrap_data(body, {}))
