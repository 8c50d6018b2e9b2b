"""Admin bookings API"""

from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list, parse_model
from ..bookings.schemas import Booking


class AdminBookingsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_bookings(self) -> list[Booking]:
        body = await self.client.get("/admin/bookings")
        return parse_list(Booking, unwrap_data(body, []))

    async def get_booking(self, booking_id: str) -> Booking:
        body = await self.client.get(f"/admin/bookings/{booking_id}")
        return parse_model(Booking, unwrap_data(body))

    async def update_booking(self, booking_id: str, update_data: dict) -> Booking:
        body = await self.client.put(f"/admin/bookings/{booking_id}", json=update_data)
        return parse_model(Booking, unwrap_data(body))

    async def delete_booking(self, booking_id: str) -> None:
        await self.client.delete(f"/admin/bookings/{booking_id}")
