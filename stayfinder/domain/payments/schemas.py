"""Payment domain schemas - Pydantic models for payment payloads"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from ...exceptions import PaymentProcessorError


class BillingAddress(BaseModel):
    """Billing address as entered on the payment form"""

    address: str = ""
    city: str = ""
    state: str = ""
    zipCode: str = ""
    country: str = ""

    @property
    def is_complete(self) -> bool:
        return all([self.address, self.city, self.state, self.zipCode, self.country])


class BillingDetails(BaseModel):
    """Billing details in the shape the processor expects"""

    name: str
    address: dict

    @classmethod
    def from_form(cls, cardholder_name: str, billing_address: BillingAddress) -> "BillingDetails":
        return cls(
            name=cardholder_name,
            address={
                "line1": billing_address.address,
                "city": billing_address.city,
                "state": billing_address.state,
                "postal_code": billing_address.zipCode,
                "country": billing_address.country,
            },
        )


class CardInput(BaseModel):
    """Tokenized card captured by the card entry element; raw card numbers never reach this client"""

    token: str


class PaymentIntent(BaseModel):
    id: str
    status: str
    amount: Optional[int] = None
    currency: Optional[str] = None

    class Config:
        extra = "ignore"


class PaymentRecord(BaseModel):
    """Entry of GET /payments/history"""

    id: Optional[str] = None
    bookingId: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    createdAt: Optional[str] = None

    class Config:
        extra = "ignore"


@dataclass
class ConfirmationResult:
    """Outcome of a card confirmation: exactly one of the two is set"""

    error: Optional[PaymentProcessorError] = None
    payment_intent: Optional[PaymentIntent] = None
