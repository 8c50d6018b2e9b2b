"""Notifications API (server-side inbox, not toast notifications)"""

from ...services.api_client import ApiClient, unwrap_data


class NotificationsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_notifications(self) -> list[dict]:
        return unwrap_data(await self.client.get("/notifications"), [])

    async def mark_as_read(self, notification_id: str) -> None:
        await self.client.put(f"/notifications/{notification_id}/read")

    async def mark_all_as_read(self) -> None:
        await self.client.put("/notifications/read-all")

    async def delete_notification(self, notification_id: str) -> None:
        await self.client.delete(f"/notifications/{notification_id}")

    async def get_unread_count(self) -> int:
        data = unwrap_data(await self.client.get("/notifications/unread-count"), 0)
        if isinstance(data, dict):
            return int(data.get("count", 0))
        return int(data)
