from datetime import date, datetime, timezone

import pytest
from conftest import booking_payload

from stayfinder.domain.bookings.form import BookingForm
from stayfinder.shared.schemas import User
from stayfinder.shared.ui import Route


@pytest.fixture
def form(app, listing, navigations, notifier):
    form = BookingForm(
        listing,
        app.bookings,
        app.session,
        navigate=navigations.append,
        notify=notifier,
    )
    form.set_dates(date(2099, 6, 1), date(2099, 6, 4))
    form.set_guest_info(phone="+15550001111")
    return form


def test_contact_info_is_prefilled_from_user(form):
    assert form.guest_info.firstName == "Jane"
    assert form.guest_info.lastName == "Doe"
    assert form.guest_info.email == "jane@example.com"


async def test_successful_submit_creates_booking_and_opens_payment(form, fake_api, navigations, notifier):
    fake_api.add("POST", "/bookings", status=201, json={"success": True, "data": booking_payload(_id="b-77")})

    booking = await form.submit()

    assert booking.id == "b-77"
    assert navigations == [Route.payment("b-77")]
    assert notifier.last.message == "Booking created successfully!"
    assert not form.busy

    sent = fake_api.body(fake_api.calls("POST", "/bookings")[0])
    assert sent["listingId"] == "listing-1"
    assert sent["guests"] == {"adults": 1, "children": 0, "infants": 0}
    assert sent["guestInfo"]["phone"] == "+15550001111"
    assert sent["checkIn"].startswith("2099-06-01")


async def test_unauthenticated_user_is_sent_to_login(form, app, fake_api, navigations, notifier):
    app.session.user = None

    assert await form.submit() is None

    assert navigations == [Route.login()]
    assert notifier.last.message == "Please login to make a booking"
    assert fake_api.requests == []


@pytest.mark.parametrize(
    "check_in, check_out, message",
    [
        (None, date(2099, 6, 4), "Please select check-in and check-out dates"),
        (date(2099, 6, 1), None, "Please select check-in and check-out dates"),
        (date(2099, 6, 4), date(2099, 6, 4), "Check-out date must be after check-in date"),
        (date(2099, 6, 5), date(2099, 6, 4), "Check-out date must be after check-in date"),
    ],
)
async def test_date_rules_block_submission(form, fake_api, notifier, check_in, check_out, message):
    form.set_dates(check_in, check_out)

    assert await form.submit() is None

    assert notifier.last.message == message
    assert fake_api.requests == []


async def test_guest_count_above_capacity_is_rejected(form, fake_api, notifier):
    form.set_guests(adults=3, children=1, infants=1)

    assert await form.submit() is None

    assert notifier.last.message == "This property can accommodate maximum 4 guests"
    assert fake_api.requests == []


async def test_guest_count_at_capacity_is_allowed(form, fake_api):
    fake_api.add("POST", "/bookings", json={"success": True, "data": booking_payload()})
    form.set_guests(adults=2, children=1, infants=1)

    assert form.validate() is None
    assert await form.submit() is not None


@pytest.mark.parametrize("field", ["firstName", "lastName", "email", "phone"])
async def test_every_contact_field_is_required(form, fake_api, notifier, field):
    form.set_guest_info(**{field: ""})

    assert await form.submit() is None

    assert notifier.last.message == "Please fill in all guest information"
    assert fake_api.requests == []


async def test_host_cannot_book_own_listing(form, app, fake_api, notifier):
    app.session.user = User.model_validate(
        {"_id": "host-1", "name": "Hank Host", "email": "hank@example.com", "role": "host"}
    )

    assert await form.submit() is None

    assert notifier.last.message == "You cannot book your own listing"
    assert fake_api.requests == []


async def test_rules_are_checked_in_order(form, app, notifier):
    app.session.user = User.model_validate({"_id": "host-1", "name": "Hank Host", "role": "host"})
    form.set_dates(None, None)
    form.set_guests(adults=9)

    await form.submit()

    assert notifier.last.message == "Please select check-in and check-out dates"


async def test_server_rejection_keeps_form_state(form, fake_api, navigations, notifier):
    fake_api.add(
        "POST", "/bookings", status=400,
        json={"success": False, "message": "Listing is not available for the selected dates"},
    )
    form.set_guests(adults=2)

    assert await form.submit() is None

    assert notifier.last.message == "Listing is not available for the selected dates"
    assert navigations == []
    assert form.guests.adults == 2
    assert form.check_in == date(2099, 6, 1)
    assert not form.busy


async def test_server_error_without_message_uses_fallback(form, fake_api, notifier):
    fake_api.add("POST", "/bookings", status=500)

    await form.submit()

    assert notifier.last.message == "Failed to create booking"


async def test_response_after_unmount_is_ignored(form, fake_api, navigations, notifier):
    fake_api.add("POST", "/bookings", json={"success": True, "data": booking_payload()})
    fake_api.on_request = lambda request: form.unmount()

    assert await form.submit() is None

    assert navigations == []
    assert notifier.history == []


def test_submission_disabled_for_zero_nights(form):
    assert form.can_submit
    form.set_dates(None, None)
    assert form.pricing.nights == 0
    assert not form.can_submit


def test_guest_steppers_clamp(form):
    form.set_guests(adults=0, children=-1, infants=-3)
    assert (form.guests.adults, form.guests.children, form.guests.infants) == (1, 0, 0)


def test_pricing_uses_listing_price(form):
    pricing = form.pricing
    assert pricing.nights == 3
    assert pricing.total == 410


async def test_aware_and_plain_dates_can_be_mixed(form, fake_api, notifier):
    fake_api.add("POST", "/bookings", json={"success": True, "data": booking_payload()})
    form.set_dates(datetime(2099, 6, 1, tzinfo=timezone.utc), date(2099, 6, 4))

    assert form.validate() is None
    assert form.pricing.nights == 3
    assert await form.submit() is not None


async def test_aware_check_out_before_plain_check_in_is_rejected(form, fake_api, notifier):
    form.set_dates(date(2099, 6, 4), datetime(2099, 6, 2, tzinfo=timezone.utc))

    assert await form.submit() is None

    assert notifier.last.message == "Check-out date must be after check-in date"
    assert fake_api.requests == []
