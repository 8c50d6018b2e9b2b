"""Review domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.schemas import ApiModel, UserRef, coerce_ref

CATEGORY_LABELS = {
    "cleanliness": "Cleanliness",
    "accuracy": "Accuracy",
    "checkIn": "Check-in",
    "communication": "Communication",
    "location": "Location",
    "value": "Value",
}


class ReviewCategories(BaseModel):
    cleanliness: int = Field(default=5, ge=1, le=5)
    accuracy: int = Field(default=5, ge=1, le=5)
    checkIn: int = Field(default=5, ge=1, le=5)
    communication: int = Field(default=5, ge=1, le=5)
    location: int = Field(default=5, ge=1, le=5)
    value: int = Field(default=5, ge=1, le=5)


class HostResponse(BaseModel):
    comment: Optional[str] = None
    respondedAt: Optional[datetime] = None


class Review(ApiModel):
    listing: Optional[ApiModel] = None
    booking: Optional[ApiModel] = None
    user: Optional[UserRef] = None
    rating: float = Field(ge=1, le=5)
    categories: ReviewCategories = Field(default_factory=ReviewCategories)
    title: str = ""
    comment: str = ""
    hostResponse: Optional[HostResponse] = None
    helpful: list[str] = Field(default_factory=list)
    createdAt: Optional[datetime] = None

    @field_validator("listing", "booking", "user", mode="before")
    @classmethod
    def validate_ref(cls, v):
        return coerce_ref(v)

    @field_validator("helpful", mode="before")
    @classmethod
    def validate_helpful(cls, v):
        if isinstance(v, list):
            return [item.get("_id") if isinstance(item, dict) else item for item in v]
        return v

    @property
    def helpful_count(self) -> int:
        return len(self.helpful)

    def is_helpful_to(self, user_id: Optional[str]) -> bool:
        return user_id is not None and user_id in self.helpful


class ReviewCreate(BaseModel):
    """Payload for POST /reviews"""

    bookingId: str
    title: str
    comment: str
    categories: ReviewCategories = Field(default_factory=ReviewCategories)


class ReviewStats(BaseModel):
    averageRating: float = 0
    totalReviews: int = 0
    categories: Optional[dict] = None

    class Config:
        extra = "ignore"
