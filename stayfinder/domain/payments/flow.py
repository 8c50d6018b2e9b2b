"""
Payment flow
Two phases: create a payment intent when the view mounts, then confirm the
card against it on submit and record the result with the API
"""
import logging
from typing import Callable, Optional

from ...exceptions import ApiError, NetworkError
from ...session import SessionContext
from ...shared.ui import Navigate, Notifier, Route, ViewController
from ..bookings.api import BookingsAPI
from ..bookings.schemas import Booking
from .api import PaymentsAPI
from .processor import PaymentProcessor
from .schemas import BillingAddress, BillingDetails, CardInput, PaymentIntent

logger = logging.getLogger(__name__)

NETWORK_INIT_ERROR = (
    "Network error: Unable to connect to payment service. "
    "Please check your internet connection and try again."
)
GENERIC_INIT_ERROR = "Failed to initialize payment. Please try again."


class PaymentAccessGuard(ViewController):
    """Decides whether the payment view may be shown for a booking"""

    def __init__(
        self,
        bookings_api: BookingsAPI,
        session: SessionContext,
        navigate: Optional[Navigate] = None,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify, navigate=navigate)
        self.bookings_api = bookings_api
        self.session = session
        self.loading = False

    async def check(self, booking_id: str) -> Optional[Booking]:
        """Return the booking when it can be paid; otherwise notify and redirect"""
        self.loading = True
        try:
            booking = await self.bookings_api.get_booking(booking_id)
        except ApiError as e:
            logger.error(f"❌ Failed to load booking {booking_id} for payment: {e}")
            if self.mounted:
                self.notify.error("Failed to load payment information")
                self.navigate(Route.bookings())
            return None
        finally:
            self.loading = False

        if not self.mounted:
            return None

        if booking is None or booking.guest_id != self.session.user_id:
            self.notify.error("You don't have permission to access this booking")
            self.navigate(Route.bookings())
            return None

        if booking.paymentStatus == "paid":
            self.notify.info("This booking has already been paid")
            self.navigate(Route.booking_detail(booking_id))
            return None

        if booking.status != "confirmed":
            self.notify.error("This booking is not confirmed yet")
            self.navigate(Route.booking_detail(booking_id))
            return None

        return booking


class PaymentFlow(ViewController):
    """
    Card payment for one booking.

    Failures never retry on their own: an intent failure keeps the form
    unusable until the flow is mounted again, a confirmation failure leaves
    the form open for an explicit resubmit.
    """

    def __init__(
        self,
        booking_id: str,
        payments_api: PaymentsAPI,
        processor: PaymentProcessor,
        on_success: Optional[Callable[[], None]] = None,
        navigate: Optional[Navigate] = None,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify, navigate=navigate)
        self.booking_id = booking_id
        self.payments_api = payments_api
        self.processor = processor
        self.on_success = on_success
        self.client_secret: Optional[str] = None
        self.error: Optional[str] = None
        self.processing = False
        self.paid = False

    @property
    def ready(self) -> bool:
        """Card entry is only offered once a client secret is in hand"""
        return self.client_secret is not None

    async def mount(self) -> None:
        self.mounted = True
        self.client_secret = None
        self.error = None
        try:
            client_secret = await self.payments_api.create_payment_intent(self.booking_id)
        except NetworkError as e:
            logger.error(f"❌ Payment initialization network error for {self.booking_id}: {e}")
            if self.mounted:
                self.error = NETWORK_INIT_ERROR
            return
        except ApiError as e:
            logger.error(f"❌ Payment initialization failed for {self.booking_id}: {e}")
            if self.mounted:
                self.error = GENERIC_INIT_ERROR
            return

        if self.mounted:
            self.client_secret = client_secret

    def _fail(self, message: str) -> bool:
        if self.mounted:
            self.error = message
        return False

    async def submit(
        self,
        cardholder_name: str,
        billing_address: BillingAddress,
        card: CardInput,
    ) -> bool:
        """Confirm the charge; True once the payment has gone through"""
        if self.paid:
            return True
        if self.processing:
            return False

        if not self.processor.is_available():
            return self._fail("Payment processor not loaded")

        # An intent failure stays on screen until the flow is mounted again
        if not self.ready:
            return self._fail(self.error or "Payment is not ready yet")

        self.processing = True
        self.error = None
        try:
            try:
                payment_intent = await self._confirm(cardholder_name, billing_address, card)
            except Exception as e:
                logger.error(f"❌ Payment submission error for booking {self.booking_id}: {e}")
                return self._fail("Payment processing failed. Please try again.")

            if payment_intent is None:
                return False

            self.paid = True
            logger.info(f"✅ Payment {payment_intent.id} succeeded for booking {self.booking_id}")
            await self._record_payment(payment_intent.id)
            self._finish()
            return True
        finally:
            self.processing = False

    async def _confirm(
        self,
        cardholder_name: str,
        billing_address: BillingAddress,
        card: CardInput,
    ) -> Optional[PaymentIntent]:
        """Validate the form and confirm the card; None after a reported failure"""
        if not cardholder_name.strip():
            self._fail("Cardholder name is required")
            return None

        if not billing_address.is_complete:
            self._fail("Complete billing address is required for payment processing")
            return None

        billing_details = BillingDetails.from_form(cardholder_name, billing_address)
        result = await self.processor.confirm_card_payment(self.client_secret, card, billing_details)

        if result.error:
            self._fail(result.error.message)
            return None

        payment_intent = result.payment_intent
        if payment_intent is None or payment_intent.status != "succeeded":
            logger.error(
                f"❌ Payment not succeeded for booking {self.booking_id}: "
                f"{payment_intent.status if payment_intent else 'no intent'}"
            )
            self._fail("Payment failed.")
            return None

        return payment_intent

    async def _record_payment(self, payment_intent_id: str) -> None:
        # Charge already succeeded; a failed update is reported, never raised
        try:
            await self.payments_api.update_payment_status(self.booking_id, payment_intent_id)
        except Exception as e:
            logger.warning(
                f"⚠️ Payment status update failed for booking {self.booking_id}: {e}"
            )
            if self.mounted:
                self.notify.error(
                    "Payment completed but status update failed. Please refresh the page."
                )
            return

        if self.mounted:
            self.notify.success("Payment completed successfully!")

    def _finish(self) -> None:
        if not self.mounted:
            return
        try:
            if self.on_success:
                self.on_success()
            else:
                self.navigate(Route.booking_detail(self.booking_id, payment="success"))
        except Exception as e:
            logger.exception(f"❌ Post-payment handler failed for booking {self.booking_id}: {e}")
