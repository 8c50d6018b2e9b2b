"""Wishlist API"""

import logging

from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list
from ..listings.schemas import ListingSummary

logger = logging.getLogger(__name__)


class WishlistAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_wishlist(self) -> list[ListingSummary]:
        body = await self.client.get("/wishlist")
        return parse_list(ListingSummary, unwrap_data(body, []))

    async def add_to_wishlist(self, listing_id: str) -> None:
        await self.client.post("/wishlist", json={"listingId": listing_id})
        logger.info(f"❤️ Added {listing_id} to wishlist")

    async def remove_from_wishlist(self, listing_id: str) -> None:
        await self.client.delete(f"/wishlist/{listing_id}")
        logger.info(f"💔 Removed {listing_id} from wishlist")

    async def clear_wishlist(self) -> None:
        await self.client.delete("/wishlist")
