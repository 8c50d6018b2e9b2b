"""Messages API"""

import logging

from ...exceptions import ApiError
from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import UserRef, parse_list, parse_model
from .schemas import Conversation, Message

logger = logging.getLogger(__name__)


class MessagesAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_conversations(self) -> list[Conversation]:
        body = await self.client.get("/messages/conversations")
        return parse_list(Conversation, unwrap_data(body, []))

    async def get_available_users(self) -> list[UserRef]:
        body = await self.client.get("/messages/available-users")
        return parse_list(UserRef, unwrap_data(body, []))

    async def start_conversation(self, user_id: str) -> str:
        """Open (or reuse) a conversation with a user; returns its id"""
        body = await self.client.post("/messages/start", json={"userId": user_id})
        conversation_id = body.get("conversationId") if isinstance(body, dict) else None
        if not conversation_id:
            raise ApiError("Failed to start conversation", payload=body)
        logger.info(f"💬 Conversation {conversation_id} ready with {user_id}")
        return conversation_id

    async def get_messages(self, conversation_id: str) -> list[Message]:
        body = await self.client.get(f"/messages/conversations/{conversation_id}")
        return parse_list(Message, unwrap_data(body, []))

    async def send_message(self, conversation_id: str, content: str) -> Message:
        body = await self.client.post(
            "/messages", json={"conversationId": conversation_id, "content": content}
        )
        return parse_model(Message, unwrap_data(body))

    async def mark_as_read(self, conversation_id: str) -> None:
        await self.client.put(f"/messages/conversations/{conversation_id}/read")
