"""
Payment processor adapter
Confirms a server-created payment intent from the client side, the way the
processor's browser SDK does: publishable key + intent client secret
"""
import logging
from typing import Any, Optional

import httpx

from ...config import STRIPE_API_URL, STRIPE_PUBLISHABLE_KEY
from ...exceptions import PaymentProcessorError
from .schemas import BillingDetails, CardInput, ConfirmationResult, PaymentIntent

logger = logging.getLogger(__name__)


def intent_id_from_client_secret(client_secret: str) -> str:
    """Client secrets look like `pi_123_secret_abc`; the intent id is the part before `_secret_`"""
    return client_secret.split("_secret_")[0]


def encode_form(data: dict, prefix: Optional[str] = None) -> dict[str, Any]:
    """Flatten nested dicts into the bracketed form keys the processor API takes"""
    encoded = {}
    for key, value in data.items():
        full_key = f"{prefix}[{key}]" if prefix else key
        if isinstance(value, dict):
            encoded.update(encode_form(value, full_key))
        elif value is not None:
            encoded[full_key] = value
    return encoded


class PaymentProcessor:
    """Interface the payment flow confirms charges through"""

    def is_available(self) -> bool:
        return True

    async def confirm_card_payment(
        self,
        client_secret: str,
        card: CardInput,
        billing_details: BillingDetails,
    ) -> ConfirmationResult:
        raise NotImplementedError


class StripeProcessor(PaymentProcessor):
    """Card confirmation against Stripe's public REST API"""

    def __init__(
        self,
        publishable_key: Optional[str] = None,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.publishable_key = publishable_key or STRIPE_PUBLISHABLE_KEY
        self.api_url = (api_url or STRIPE_API_URL).rstrip("/")
        self.transport = transport

        if not self.publishable_key:
            logger.warning("Stripe publishable key not set; payments will fail until configured")
        else:
            logger.info(f"Stripe processor initialized ({self.publishable_key[:8]}...)")

    def is_available(self) -> bool:
        return bool(self.publishable_key)

    async def confirm_card_payment(
        self,
        client_secret: str,
        card: CardInput,
        billing_details: BillingDetails,
    ) -> ConfirmationResult:
        intent_id = intent_id_from_client_secret(client_secret)
        payload = encode_form(
            {
                "client_secret": client_secret,
                "payment_method_data": {
                    "type": "card",
                    "card": {"token": card.token},
                    "billing_details": billing_details.model_dump(),
                },
            }
        )

        async with httpx.AsyncClient(timeout=30.0, transport=self.transport) as http_client:
            response = await http_client.post(
                f"{self.api_url}/payment_intents/{intent_id}/confirm",
                data=payload,
                headers={"Authorization": f"Bearer {self.publishable_key}"},
            )

        body = response.json()
        if response.status_code != 200 or "error" in body:
            error = body.get("error", {})
            logger.error(
                f"❌ Card confirmation failed for {intent_id}: "
                f"code={error.get('code')} decline_code={error.get('decline_code')} "
                f"param={error.get('param')}"
            )
            return ConfirmationResult(
                error=PaymentProcessorError(
                    error.get("message") or "Your card could not be charged.",
                    code=error.get("code"),
                    decline_code=error.get("decline_code"),
                    param=error.get("param"),
                )
            )

        return ConfirmationResult(payment_intent=PaymentIntent.model_validate(body))
