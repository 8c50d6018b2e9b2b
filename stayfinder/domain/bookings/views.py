"""Booking detail controller"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ...exceptions import ApiError
from ...session import SessionContext
from ...shared.ui import Navigate, Notifier, Route, ViewController
from .api import BookingsAPI
from .schemas import Booking

logger = logging.getLogger(__name__)

CANCELLABLE_STATUSES = {"pending", "confirmed"}


def _now_like(moment: datetime) -> datetime:
    now = datetime.now(timezone.utc)
    return now if moment.tzinfo else now.replace(tzinfo=None)


def can_cancel(booking: Booking, is_host: bool, now: Optional[datetime] = None) -> bool:
    """Guests may cancel a pending or confirmed stay until check-in"""
    if is_host or booking.status not in CANCELLABLE_STATUSES or not booking.checkIn:
        return False
    return booking.checkIn > (now or _now_like(booking.checkIn))


def can_pay(booking: Booking, is_host: bool) -> bool:
    return not is_host and booking.status == "confirmed" and booking.paymentStatus == "pending"


class BookingDetailView(ViewController):
    def __init__(
        self,
        booking_id: str,
        bookings_api: BookingsAPI,
        session: SessionContext,
        payment_indicator: Optional[str] = None,
        navigate: Optional[Navigate] = None,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify, navigate=navigate)
        self.booking_id = booking_id
        self.bookings_api = bookings_api
        self.session = session
        self.payment_indicator = payment_indicator
        self.booking: Optional[Booking] = None
        self.loading = False
        self.action_loading = False

    @property
    def is_host(self) -> bool:
        return self.session.role == "host"

    @property
    def can_cancel(self) -> bool:
        return self.booking is not None and can_cancel(self.booking, self.is_host)

    @property
    def can_pay(self) -> bool:
        return self.booking is not None and can_pay(self.booking, self.is_host)

    async def load(self) -> Optional[Booking]:
        if self.payment_indicator == "success":
            # Shown once; the indicator is dropped from the route right away
            self.payment_indicator = None
            self.notify.success("Payment completed successfully!")
            self.navigate(Route.booking_detail(self.booking_id))

        return await self.refresh()

    async def refresh(self) -> Optional[Booking]:
        self.loading = True
        try:
            booking = await self.bookings_api.get_booking(self.booking_id)
        except ApiError as e:
            logger.error(f"❌ Error fetching booking {self.booking_id}: {e}")
            if self.mounted:
                self.notify.error(e.user_message("Failed to load booking details"))
                self.navigate(Route.bookings())
            return None
        finally:
            self.loading = False

        if not self.mounted:
            return None

        if booking is None:
            self.notify.error("Booking not found or has invalid references")
            self.navigate(Route.bookings())
            return None

        self.booking = booking
        return booking

    async def cancel(self, reason: str = "Cancelled by user") -> bool:
        if self.action_loading:
            return False

        self.action_loading = True
        try:
            await self.bookings_api.cancel_booking(self.booking_id, reason)
        except ApiError as e:
            logger.error(f"❌ Error cancelling booking {self.booking_id}: {e}")
            if self.mounted:
                self.notify.error("Failed to cancel booking")
            return False
        finally:
            self.action_loading = False

        if self.mounted:
            self.notify.success("Booking cancelled successfully")
            await self.refresh()
        return True

    async def update_status(self, status: str) -> bool:
        """Host-side status change (confirm / complete)"""
        if self.action_loading:
            return False

        self.action_loading = True
        try:
            await self.bookings_api.update_booking(self.booking_id, {"status": status})
        except ApiError as e:
            logger.error(f"❌ Error updating booking {self.booking_id}: {e}")
            if self.mounted:
                self.notify.error("Failed to update booking")
            return False
        finally:
            self.action_loading = False

        if self.mounted:
            self.notify.success(f"Booking {status} successfully")
            await self.refresh()
        return True
