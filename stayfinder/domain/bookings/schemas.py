"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.schemas import ApiModel, UserRef, coerce_ref
from ..listings.schemas import ListingSummary

BookingStatus = Literal["pending", "confirmed", "cancelled", "completed"]
PaymentStatus = Literal["pending", "paid", "failed", "refunded"]


class GuestCounts(BaseModel):
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants


class GuestInfo(BaseModel):
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    phone: str = ""


class PriceBreakdownData(BaseModel):
    """Price breakdown as stored by the server"""

    nights: int = 0
    basePrice: float = 0
    serviceFee: float = 0
    cleaningFee: float = 0
    taxes: float = 0


class Cancellation(BaseModel):
    reason: Optional[str] = None
    cancelledAt: Optional[datetime] = None
    refundAmount: Optional[float] = None


class Booking(ApiModel):
    """Schema for a booking as returned by the API"""

    listing: Optional[ListingSummary] = None
    guest: Optional[UserRef] = None
    host: Optional[UserRef] = None
    checkIn: Optional[datetime] = None
    checkOut: Optional[datetime] = None
    guests: GuestCounts = Field(default_factory=GuestCounts)
    priceBreakdown: Optional[PriceBreakdownData] = None
    totalPrice: Optional[float] = None
    guestInfo: Optional[GuestInfo] = None
    specialRequests: Optional[str] = None
    status: BookingStatus = "pending"
    paymentStatus: PaymentStatus = "pending"
    cancellation: Optional[Cancellation] = None
    createdAt: Optional[datetime] = None

    @field_validator("listing", "guest", "host", mode="before")
    @classmethod
    def validate_ref(cls, v):
        return coerce_ref(v)

    @property
    def listing_id(self) -> Optional[str]:
        return self.listing.id if self.listing else None

    @property
    def guest_id(self) -> Optional[str]:
        return self.guest.id if self.guest else None


class BookingCreate(BaseModel):
    """Payload for POST /bookings"""

    listingId: str
    checkIn: datetime
    checkOut: datetime
    guests: GuestCounts
    guestInfo: GuestInfo
    specialRequests: str = ""
