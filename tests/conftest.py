import json

import httpx
import pytest

from stayfinder.client import StayFinder
from stayfinder.domain.listings.schemas import Listing
from stayfinder.session import MemoryTokenStore, SessionContext
from stayfinder.shared.schemas import User
from stayfinder.shared.ui import Notifier

BASE_URL = "http://testserver/api"


class FakeAPI:
    """Canned responses keyed by (method, path) with the /api prefix stripped"""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []
        self.on_request = None

    def add(self, method, path, status=200, json=None, exc=None):
        self.routes[(method, path)] = (status, json, exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request:
            self.on_request(request)
        path = request.url.path.removeprefix("/api")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"success": False, "message": "Not found"})
        status, body, exc = route
        if exc is not None:
            raise exc
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, method, path) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path.removeprefix("/api") == path
        ]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content)


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def guest_user():
    return User.model_validate(
        {"_id": "guest-1", "name": "Jane Doe", "email": "jane@example.com", "role": "guest"}
    )


@pytest.fixture
def session(guest_user):
    session = SessionContext(MemoryTokenStore("tok-123"))
    session.user = guest_user
    return session


@pytest.fixture
def navigations():
    return []


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def app(fake_api, session, navigations, notifier):
    return StayFinder(
        session=session,
        base_url=BASE_URL,
        navigate=navigations.append,
        notify=notifier,
        transport=fake_api.transport(),
    )


@pytest.fixture
def listing():
    return Listing.model_validate(
        {
            "_id": "listing-1",
            "title": "Lakeside Cabin",
            "price": 100,
            "guests": 4,
            "bedrooms": 2,
            "bathrooms": 1,
            "amenities": ["wifi", "kitchen"],
            "images": [{"url": "/uploads/cabin.jpg"}],
            "rating": {"average": 4.6, "count": 12},
            "host": {"_id": "host-1", "name": "Hank Host"},
        }
    )


def booking_payload(**overrides):
    data = {
        "_id": "booking-1",
        "listing": {"_id": "listing-1", "title": "Lakeside Cabin", "price": 100},
        "guest": {"_id": "guest-1", "name": "Jane Doe"},
        "host": {"_id": "host-1", "name": "Hank Host"},
        "checkIn": "2099-06-01T00:00:00.000Z",
        "checkOut": "2099-06-04T00:00:00.000Z",
        "guests": {"adults": 2, "children": 0, "infants": 0},
        "priceBreakdown": {
            "nights": 3,
            "basePrice": 300,
            "serviceFee": 30,
            "cleaningFee": 50,
            "taxes": 30,
        },
        "totalPrice": 410,
        "status": "confirmed",
        "paymentStatus": "pending",
    }
    data.update(overrides)
    return data
