"""Bookings API - guest/host booking endpoints"""

import logging
from typing import Optional

from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list, parse_model
from .schemas import Booking, BookingCreate

logger = logging.getLogger(__name__)


class BookingsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_bookings(self) -> list[Booking]:
        body = await self.client.get("/bookings/")
        return parse_list(Booking, unwrap_data(body, []))

    async def get_all_bookings(self) -> list[Booking]:
        body = await self.client.get("/bookings/all")
        return parse_list(Booking, unwrap_data(body, []))

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        body = await self.client.get(f"/bookings/{booking_id}")
        data = unwrap_data(body)
        return parse_model(Booking, data) if data else None

    async def create_booking(self, booking: BookingCreate) -> Booking:
        body = await self.client.post("/bookings", json=booking.model_dump(mode="json"))
        created = parse_model(Booking, unwrap_data(body))
        logger.info(f"✅ Booking created: {created.id} for listing {booking.listingId}")
        return created

    async def update_booking(self, booking_id: str, update_data: dict) -> Booking:
        body = await self.client.put(f"/bookings/{booking_id}", json=update_data)
        return parse_model(Booking, unwrap_data(body))

    async def cancel_booking(self, booking_id: str, reason: Optional[str] = None) -> dict:
        body = await self.client.delete(f"/bookings/{booking_id}", json={"reason": reason})
        logger.info(f"🚫 Booking cancelled: {booking_id}")
        return body

    async def get_bookings_by_listing(self, listing_id: str) -> list[Booking]:
        body = await self.client.get(f"/bookings/listing/{listing_id}")
        return parse_list(Booking, unwrap_data(body, []))

    async def confirm_booking(self, booking_id: str) -> Booking:
        body = await self.client.put(f"/bookings/{booking_id}/confirm")
        return parse_model(Booking, unwrap_data(body))

    async def complete_booking(self, booking_id: str) -> Booking:
        body = await self.client.put(f"/bookings/{booking_id}/complete")
        return parse_model(Booking, unwrap_data(body))
