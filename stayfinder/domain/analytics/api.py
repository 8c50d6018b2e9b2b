"""Analytics API - dashboards are passed through as the server shapes them"""

from typing import Optional

from ...services.api_client import ApiClient, unwrap_data


class AnalyticsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_dashboard_stats(self) -> dict:
        return unwrap_data(await self.client.get("/analytics/dashboard"), {})

    async def get_booking_stats(self, params: Optional[dict] = None) -> dict:
        return unwrap_data(await self.client.get("/analytics/bookings", params=params), {})

    async def get_revenue_stats(self, params: Optional[dict] = None) -> dict:
        return unwrap_data(await self.client.get("/analytics/revenue", params=params), {})

    async def get_listing_performance(self, listing_id: str) -> dict:
        return unwrap_data(await self.client.get(f"/analytics/listing/{listing_id}"), {})

    async def get_user_stats(self) -> dict:
        return unwrap_data(await self.client.get("/analytics/users"), {})
