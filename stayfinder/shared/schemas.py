"""Shared schemas - base model, entity references and response normalization"""

import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import ApiError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiModel(BaseModel):
    """Base for every entity received from the API (Mongo-style `_id`, camelCase keys)"""

    id: Optional[str] = Field(default=None, alias="_id")

    class Config:
        populate_by_name = True
        extra = "ignore"


def coerce_ref(value: Any) -> Any:
    """References arrive either populated (an object) or as a bare id"""
    if isinstance(value, str):
        return {"_id": value}
    return value


class UserRef(ApiModel):
    """Populated user reference (host, guest, review author)"""

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    profilePicture: Optional[str] = None


class User(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: str = "guest"
    isVerified: bool = False
    phoneNumber: Optional[str] = None
    profilePicture: Optional[str] = None
    address: Optional[dict] = None

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        if v not in {"guest", "host", "admin"}:
            raise ValueError("role must be one of guest, host, admin")
        return v

    @property
    def first_name(self) -> str:
        parts = (self.name or "").split(" ")
        return parts[0] if parts else ""

    @property
    def last_name(self) -> str:
        parts = (self.name or "").split(" ")
        return parts[1] if len(parts) > 1 else ""


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    """Validate one API object, turning schema mismatches into an ApiError"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"❌ Unexpected {model.__name__} payload: {e}")
        raise ApiError("Unexpected response from server", payload=data) from e


def parse_list(model: type[ModelT], data: Any) -> list[ModelT]:
    if data is None:
        return []
    if not isinstance(data, list):
        data = [data]
    return [parse_model(model, item) for item in data]
