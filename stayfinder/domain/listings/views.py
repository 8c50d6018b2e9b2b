"""Listing detail controller"""

import asyncio
import logging
from typing import Optional

from ...exceptions import ApiError
from ...session import SessionContext
from ...shared.ui import Notifier, ViewController
from ..bookings.api import BookingsAPI
from ..bookings.schemas import Booking
from ..wishlist.api import WishlistAPI
from .api import ListingsAPI
from .schemas import Listing

logger = logging.getLogger(__name__)


def can_review(listing: Listing, user_id: Optional[str], user_bookings: list[Booking]) -> bool:
    """A guest reviews a listing once, after a completed stay there"""
    if not user_id:
        return False
    has_completed_stay = any(
        b.listing_id == listing.id and b.status == "completed" for b in user_bookings
    )
    already_reviewed = any(r.user and r.user.id == user_id for r in listing.reviews)
    return has_completed_stay and not already_reviewed


class ListingDetailView(ViewController):
    """
    Listing page state.

    The listing, the wishlist flag and the user's bookings load concurrently;
    each fetch owns its own slice of state, so a failed wishlist or bookings
    fetch leaves the rest of the page intact.
    """

    def __init__(
        self,
        listing_id: str,
        listings_api: ListingsAPI,
        wishlist_api: WishlistAPI,
        bookings_api: BookingsAPI,
        session: SessionContext,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify)
        self.listing_id = listing_id
        self.listings_api = listings_api
        self.wishlist_api = wishlist_api
        self.bookings_api = bookings_api
        self.session = session

        self.listing: Optional[Listing] = None
        self.error: Optional[str] = None
        self.loading = False
        self.wishlisted = False
        self.wishlist_loading = False
        self.user_bookings: list[Booking] = []

    @property
    def can_review(self) -> bool:
        if self.listing is None or not self.session.is_authenticated:
            return False
        return can_review(self.listing, self.session.user_id, self.user_bookings)

    async def load(self) -> None:
        tasks = [self._load_listing()]
        if self.session.is_authenticated:
            tasks += [self._load_wishlisted(), self._load_user_bookings()]
        await asyncio.gather(*tasks)

    async def _load_listing(self) -> None:
        self.loading = True
        self.error = None
        try:
            listing = await self.listings_api.get_listing(self.listing_id)
        except ApiError as e:
            logger.error(f"❌ Error fetching listing {self.listing_id}: {e}")
            if self.mounted:
                self.error = e.user_message("An error occurred while fetching the listing.")
            return
        finally:
            self.loading = False

        if self.mounted:
            self.listing = listing

    async def _load_wishlisted(self) -> None:
        try:
            wishlist = await self.wishlist_api.get_wishlist()
        except ApiError as e:
            logger.debug(f"Wishlist status unavailable for {self.listing_id}: {e}")
            return

        if self.mounted:
            self.wishlisted = any(item.id == self.listing_id for item in wishlist)

    async def _load_user_bookings(self) -> None:
        try:
            bookings = await self.bookings_api.get_bookings()
        except ApiError as e:
            logger.debug(f"User bookings unavailable for review eligibility: {e}")
            return

        if self.mounted:
            self.user_bookings = bookings

    async def toggle_wishlist(self) -> None:
        if not self.session.is_authenticated:
            self.notify.error("Please login to use wishlist.")
            return
        if self.wishlist_loading:
            return

        self.wishlist_loading = True
        try:
            if self.wishlisted:
                await self.wishlist_api.remove_from_wishlist(self.listing_id)
                message = "Removed from wishlist"
            else:
                await self.wishlist_api.add_to_wishlist(self.listing_id)
                message = "Added to wishlist"
        except ApiError as e:
            logger.error(f"❌ Wishlist update failed for {self.listing_id}: {e}")
            if self.mounted:
                self.notify.error("Failed to update wishlist")
            return
        finally:
            self.wishlist_loading = False

        if self.mounted:
            self.wishlisted = not self.wishlisted
            self.notify.success(message)
