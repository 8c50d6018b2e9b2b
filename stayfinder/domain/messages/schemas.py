"""Messaging schemas"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ...shared.schemas import ApiModel, UserRef, coerce_ref


class Conversation(ApiModel):
    participants: list[UserRef] = Field(default_factory=list)
    otherUser: Optional[UserRef] = None
    unreadCount: int = 0
    lastMessage: Optional[str] = None
    updatedAt: Optional[datetime] = None

    @field_validator("participants", mode="before")
    @classmethod
    def validate_participants(cls, v):
        if isinstance(v, list):
            return [coerce_ref(item) for item in v]
        return v

    @field_validator("otherUser", mode="before")
    @classmethod
    def validate_other_user(cls, v):
        return coerce_ref(v)


class Message(ApiModel):
    conversation: Optional[str] = None
    sender: Optional[UserRef] = None
    content: str = ""
    createdAt: Optional[datetime] = None
    readBy: list[str] = Field(default_factory=list)

    @field_validator("sender", mode="before")
    @classmethod
    def validate_sender(cls, v):
        return coerce_ref(v)

    @field_validator("conversation", mode="before")
    @classmethod
    def validate_conversation(cls, v):
        if isinstance(v, dict):
            return v.get("_id")
        return v

    @field_validator("readBy", mode="before")
    @classmethod
    def validate_read_by(cls, v):
        if isinstance(v, list):
            return [item.get("_id") if isinstance(item, dict) else item for item in v]
        return v
