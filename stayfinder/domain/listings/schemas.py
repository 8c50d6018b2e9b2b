"""Listing domain schemas - Pydantic models for listing payloads"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.schemas import ApiModel, UserRef, coerce_ref


class Coordinates(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None


class Location(BaseModel):
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipCode: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class ListingImage(BaseModel):
    url: str
    caption: Optional[str] = None


class Rating(BaseModel):
    average: float = 0
    count: int = 0


class EmbeddedReview(ApiModel):
    """Review as embedded in a listing detail response"""

    user: Optional[UserRef] = None
    rating: Optional[float] = None

    @field_validator("user", mode="before")
    @classmethod
    def validate_user(cls, v):
        return coerce_ref(v)


class Listing(ApiModel):
    """Schema for a listing as returned by the API"""

    title: Optional[str] = None
    description: Optional[str] = None
    propertyType: Optional[str] = None
    price: float = Field(gt=0)
    guests: int = Field(default=1, ge=0)
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: float = Field(default=0, ge=0)
    amenities: list[str] = Field(default_factory=list)
    location: Optional[Location] = None
    images: list[ListingImage] = Field(default_factory=list)
    rating: Rating = Field(default_factory=Rating)
    host: Optional[UserRef] = None
    reviews: list[EmbeddedReview] = Field(default_factory=list)

    @field_validator("host", mode="before")
    @classmethod
    def validate_host(cls, v):
        return coerce_ref(v)

    @field_validator("images", mode="before")
    @classmethod
    def validate_images(cls, v):
        # Older listings stored bare URL strings
        if isinstance(v, list):
            return [{"url": item} if isinstance(item, str) else item for item in v]
        return v

    @property
    def host_id(self) -> Optional[str]:
        return self.host.id if self.host else None


class ListingSummary(ApiModel):
    """Listing as populated inside bookings and wishlist entries"""

    title: Optional[str] = None
    price: Optional[float] = None
    guests: Optional[int] = None
    location: Optional[Location] = None
    images: list[ListingImage] = Field(default_factory=list)
    host: Optional[UserRef] = None

    @field_validator("host", mode="before")
    @classmethod
    def validate_host(cls, v):
        return coerce_ref(v)

    @field_validator("images", mode="before")
    @classmethod
    def validate_images(cls, v):
        if isinstance(v, list):
            return [{"url": item} if isinstance(item, str) else item for item in v]
        return v


class Pagination(BaseModel):
    currentPage: int = 1
    totalPages: int = 1
    totalItems: int = 0
    limit: Optional[int] = None


class ListingPage(BaseModel):
    """Paged listing result; featured queries come back as a bare list"""

    listings: list[Listing] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @classmethod
    def from_data(cls, data) -> "ListingPage":
        if isinstance(data, list):
            return cls(
                listings=data,
                pagination=Pagination(totalItems=len(data), limit=len(data)),
            )
        return cls.model_validate(data or {})
