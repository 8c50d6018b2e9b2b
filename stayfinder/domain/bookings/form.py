"""
Booking form
In-progress booking input, validated on submit before anything reaches the API
"""
import logging
from typing import Optional

from ...exceptions import ApiError
from ...session import SessionContext
from ...shared.ui import Navigate, Notifier, Route, ViewController
from ..listings.schemas import Listing
from .api import BookingsAPI
from .pricing import DateLike, PriceBreakdown, as_datetime, calculate_pricing
from .schemas import Booking, BookingCreate, GuestCounts, GuestInfo

logger = logging.getLogger(__name__)


class BookingForm(ViewController):
    """Single editing state; `busy` blocks a second submission while one is in flight"""

    def __init__(
        self,
        listing: Listing,
        bookings_api: BookingsAPI,
        session: SessionContext,
        navigate: Optional[Navigate] = None,
        notify: Optional[Notifier] = None,
    ):
        super().__init__(notify=notify, navigate=navigate)
        self.listing = listing
        self.bookings_api = bookings_api
        self.session = session
        self.busy = False

        self.check_in: Optional[DateLike] = None
        self.check_out: Optional[DateLike] = None
        self.guests = GuestCounts()
        user = session.user
        self.guest_info = GuestInfo(
            firstName=user.first_name if user else "",
            lastName=user.last_name if user else "",
            email=(user.email or "") if user else "",
            phone="",
        )
        self.special_requests = ""

    @property
    def is_host(self) -> bool:
        user_id = self.session.user_id
        return user_id is not None and user_id == self.listing.host_id

    @property
    def total_guests(self) -> int:
        return self.guests.total

    @property
    def pricing(self) -> PriceBreakdown:
        return calculate_pricing(self.check_in, self.check_out, self.listing.price)

    @property
    def can_submit(self) -> bool:
        return not self.busy and self.pricing.nights > 0

    def set_dates(self, check_in: Optional[DateLike], check_out: Optional[DateLike]) -> None:
        self.check_in = check_in
        self.check_out = check_out

    def set_guests(
        self,
        adults: Optional[int] = None,
        children: Optional[int] = None,
        infants: Optional[int] = None,
    ) -> None:
        # Steppers never go below one adult or zero of anything else
        self.guests = GuestCounts(
            adults=max(1, adults if adults is not None else self.guests.adults),
            children=max(0, children if children is not None else self.guests.children),
            infants=max(0, infants if infants is not None else self.guests.infants),
        )

    def set_guest_info(self, **fields) -> None:
        self.guest_info = self.guest_info.model_copy(update=fields)

    def validate(self) -> Optional[str]:
        """First failing rule's message, or None when the form may be sent"""
        if not self.check_in or not self.check_out:
            return "Please select check-in and check-out dates"

        if as_datetime(self.check_in) >= as_datetime(self.check_out):
            return "Check-out date must be after check-in date"

        if self.total_guests > self.listing.guests:
            return f"This property can accommodate maximum {self.listing.guests} guests"

        info = self.guest_info
        if not info.firstName or not info.lastName or not info.email or not info.phone:
            return "Please fill in all guest information"

        if self.is_host:
            return "You cannot book your own listing"

        return None

    def build_payload(self) -> BookingCreate:
        return BookingCreate(
            listingId=self.listing.id,
            checkIn=as_datetime(self.check_in),
            checkOut=as_datetime(self.check_out),
            guests=self.guests,
            guestInfo=self.guest_info,
            specialRequests=self.special_requests,
        )

    async def submit(self) -> Optional[Booking]:
        """
        Validate and create the booking.

        Never raises: every failure becomes a notification and the form keeps
        its input so the user can fix it and resubmit.
        """
        if self.busy:
            return None

        if not self.session.is_authenticated:
            self.notify.error("Please login to make a booking")
            self.navigate(Route.login())
            return None

        error = self.validate()
        if error:
            logger.warning(f"⚠️ Booking form rejected for listing {self.listing.id}: {error}")
            self.notify.error(error)
            return None

        self.busy = True
        try:
            booking = await self.bookings_api.create_booking(self.build_payload())
        except ApiError as e:
            if self.mounted:
                self.notify.error(e.user_message("Failed to create booking"))
            return None
        finally:
            self.busy = False

        if not self.mounted:
            logger.debug(f"Booking {booking.id} created after form was closed")
            return None

        self.notify.success("Booking created successfully!")
        self.navigate(Route.payment(booking.id))
        return booking
