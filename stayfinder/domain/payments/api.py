"""Payments API - intents, status updates, refunds and history"""

import logging

from ...exceptions import ApiError
from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list
from .schemas import PaymentRecord

logger = logging.getLogger(__name__)


class PaymentsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def process_payment(self, payment_data: dict) -> dict:
        return await self.client.post("/payments/process", json=payment_data)

    async def get_payment_methods(self) -> list:
        body = await self.client.get("/payments/methods")
        return unwrap_data(body, [])

    async def refund_payment(self, refund_data: dict) -> dict:
        body = await self.client.post("/payments/refund", json=refund_data)
        logger.info(f"💸 Refund requested: {refund_data.get('bookingId')}")
        return body

    async def get_payment_history(self) -> list[PaymentRecord]:
        body = await self.client.get("/payments/history")
        return parse_list(PaymentRecord, unwrap_data(body, []))

    async def create_payment_intent(self, booking_id: str) -> str:
        """Ask the server for a payment intent and return its client secret"""
        body = await self.client.post("/payments/create-intent", json={"bookingId": booking_id})
        client_secret = body.get("clientSecret") if isinstance(body, dict) else None
        if not client_secret:
            logger.error(f"❌ No client secret in payment intent response for booking {booking_id}")
            raise ApiError("Failed to initialize payment", payload=body)
        logger.info(f"✅ Payment intent ready for booking {booking_id}")
        return client_secret

    async def update_payment_status(self, booking_id: str, payment_intent_id: str) -> dict:
        return await self.client.put(
            f"/payments/update-status/{booking_id}",
            json={"paymentIntentId": payment_intent_id},
        )
