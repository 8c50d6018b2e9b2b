import pytest
from pydantic import ValidationError

from stayfinder.domain.auth.schemas import OTPVerification, RegisterRequest
from stayfinder.exceptions import ApiError
from stayfinder.shared.ui import Route

USER = {"_id": "guest-1", "name": "Jane Doe", "email": "jane@example.com", "role": "guest"}


async def test_login_stores_token_and_user(app, fake_api):
    app.session.clear()
    fake_api.add("POST", "/auth/login", json={"success": True, "data": {"token": "tok-new", "user": USER}})

    assert await app.auth_service.login("  Jane@Example.com ", "secret1")

    assert app.session.token == "tok-new"
    assert app.session.user_id == "guest-1"
    assert fake_api.body(fake_api.requests[0]) == {"email": "jane@example.com", "password": "secret1"}


async def test_unverified_login_goes_to_otp(app, fake_api, navigations):
    app.session.clear()
    fake_api.add(
        "POST", "/auth/login", status=403,
        json={"success": False, "message": "Please verify your email", "requiresVerification": True},
    )

    with pytest.raises(ApiError):
        await app.auth_service.login("jane@example.com", "secret1")

    assert navigations == [Route.verify_otp("jane@example.com")]
    assert app.session.token is None


async def test_check_auth_restores_user(app, fake_api):
    app.session.user = None
    fake_api.add("GET", "/auth/profile", json={"success": True, "data": {"user": USER}})

    user = await app.auth_service.check_auth()

    assert user.email == "jane@example.com"
    assert app.session.is_authenticated


async def test_check_auth_failure_drops_token(app, fake_api):
    fake_api.add("GET", "/auth/profile", status=500)

    assert await app.auth_service.check_auth() is None

    assert app.session.token is None


async def test_start_without_token_makes_no_request(app, fake_api):
    app.session.clear()

    await app.start()

    assert fake_api.requests == []
    assert app.session.user is None


async def test_register_moves_to_otp_entry(app, fake_api, navigations):
    fake_api.add("POST", "/auth/register", status=201, json={"success": True, "message": "OTP sent"})

    data = RegisterRequest(name="Jane Doe", email="jane@example.com", password="secret1", role="host")
    assert await app.auth_service.register(data)

    assert navigations == [Route.verify_otp("jane@example.com", is_registration=True)]


async def test_register_error_is_notified(app, fake_api, notifier):
    fake_api.add("POST", "/auth/register", status=400, json={"success": False, "message": "User already exists"})

    with pytest.raises(ApiError):
        await app.auth_service.register(
            RegisterRequest(name="Jane", email="jane@example.com", password="secret1")
        )

    assert notifier.last.message == "User already exists"


async def test_verify_registration_otp_logs_in(app, fake_api):
    app.session.clear()
    fake_api.add(
        "POST", "/auth/verify-registration",
        json={"success": True, "data": {"token": "tok-otp", "user": USER}},
    )

    assert await app.auth_service.verify_registration_otp("jane@example.com", "123456")

    assert app.session.token == "tok-otp"


def test_logout_is_local(app, fake_api):
    app.auth_service.logout()

    assert app.session.token is None
    assert app.session.user is None
    assert fake_api.requests == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "A", "email": "not-an-email", "password": "secret1"},
        {"name": "A", "email": "a@b.co", "password": "short"},
        {"name": "A", "email": "a@b.co", "password": "secret1", "role": "admin"},
    ],
)
def test_register_request_validation(kwargs):
    with pytest.raises(ValidationError):
        RegisterRequest(**kwargs)


def test_otp_must_be_six_digits():
    assert OTPVerification(email="a@b.co", otp=" 123456 ").otp == "123456"
    with pytest.raises(ValidationError):
        OTPVerification(email="a@b.co", otp="12ab56")
