"""Users API - admin-scoped user management"""

import logging
from typing import Optional

from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import User, parse_list, parse_model

logger = logging.getLogger(__name__)


class UsersAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_users(self, params: Optional[dict] = None) -> list[User]:
        body = await self.client.get("/users", params=params)
        return parse_list(User, unwrap_data(body, []))

    async def get_user(self, user_id: str) -> User:
        body = await self.client.get(f"/users/{user_id}")
        return parse_model(User, unwrap_data(body))

    async def update_user(self, user_id: str, user_data: dict) -> User:
        body = await self.client.put(f"/users/{user_id}", json=user_data)
        return parse_model(User, unwrap_data(body))

    async def delete_user(self, user_id: str) -> None:
        await self.client.delete(f"/users/{user_id}")
        logger.info(f"🗑️ User deleted: {user_id}")

    async def get_user_stats(self) -> dict:
        body = await self.client.get("/users/stats")
        return unwrap_data(body, {})

    async def verify_user(self, user_id: str) -> User:
        body = await self.client.put(f"/users/{user_id}/verify")
        return parse_model(User, unwrap_data(body))

    async def suspend_user(self, user_id: str) -> User:
        body = await self.client.put(f"/users/{user_id}/suspend")
        logger.info(f"⛔ User suspended: {user_id}")
        return parse_model(User, unwrap_data(body))
