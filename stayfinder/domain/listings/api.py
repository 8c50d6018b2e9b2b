"""Listings API - one call per listing endpoint"""

import logging
from typing import Optional

from pydantic import ValidationError

from ...exceptions import ApiError
from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list, parse_model
from .schemas import Listing, ListingPage

logger = logging.getLogger(__name__)


class ListingsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_listings(self, params: Optional[dict] = None) -> ListingPage:
        body = await self.client.get("/listings", params=params)
        try:
            return ListingPage.from_data(unwrap_data(body))
        except ValidationError as e:
            logger.error(f"❌ Unexpected listings payload: {e}")
            raise ApiError("Unexpected response from server", payload=body) from e

    async def get_listing(self, listing_id: str) -> Listing:
        body = await self.client.get(f"/listings/{listing_id}")
        return parse_model(Listing, unwrap_data(body))

    async def create_listing(self, listing_data: dict) -> Listing:
        body = await self.client.post("/listings", json=listing_data)
        listing = parse_model(Listing, unwrap_data(body))
        logger.info(f"✅ Listing created: {listing.id}")
        return listing

    async def update_listing(self, listing_id: str, listing_data: dict) -> Listing:
        body = await self.client.put(f"/listings/{listing_id}", json=listing_data)
        return parse_model(Listing, unwrap_data(body))

    async def delete_listing(self, listing_id: str) -> None:
        await self.client.delete(f"/listings/{listing_id}")
        logger.info(f"🗑️ Listing deleted: {listing_id}")

    async def get_host_listings(self, host_id: str) -> list[Listing]:
        body = await self.client.get(f"/listings/host/{host_id}")
        return parse_list(Listing, unwrap_data(body, []))

    async def get_my_listings(self) -> list[Listing]:
        body = await self.client.get("/listings/my-listings")
        return parse_list(Listing, unwrap_data(body, []))

    async def search_listings(self, search_params: Optional[dict] = None) -> ListingPage:
        body = await self.client.get("/listings/search", params=search_params)
        try:
            return ListingPage.from_data(unwrap_data(body))
        except ValidationError as e:
            logger.error(f"❌ Unexpected search payload: {e}")
            raise ApiError("Unexpected response from server", payload=body) from e

    async def get_featured_listings(self) -> list[Listing]:
        body = await self.client.get("/listings/featured")
        return parse_list(Listing, unwrap_data(body, []))

    async def toggle_favorite(self, listing_id: str) -> dict:
        return await self.client.post(f"/listings/{listing_id}/favorite")

    async def get_favorites(self) -> list[Listing]:
        body = await self.client.get("/listings/favorites")
        return parse_list(Listing, unwrap_data(body, []))
