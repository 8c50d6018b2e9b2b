"""
StayFinder client
Wires the session, the HTTP client and every resource API together
"""
import logging
from typing import Optional

import httpx

from .domain.admin.api import AdminBookingsAPI
from .domain.analytics.api import AnalyticsAPI
from .domain.auth.api import AuthAPI
from .domain.auth.service import AuthService
from .domain.bookings.api import BookingsAPI
from .domain.listings.api import ListingsAPI
from .domain.messages.api import MessagesAPI
from .domain.notifications.api import NotificationsAPI
from .domain.payments.api import PaymentsAPI
from .domain.reviews.api import ReviewsAPI
from .domain.uploads.api import UploadsAPI
from .domain.users.api import UsersAPI
from .domain.wishlist.api import WishlistAPI
from .services.api_client import ApiClient
from .session import SessionContext
from .shared.ui import Navigate, Notifier, Route

logger = logging.getLogger(__name__)


class StayFinder:
    """
    Application root.

    Owns the session and decides navigation: when the API client reports an
    unauthorized response the session is already cleared and this object
    sends the user to the login view.
    """

    def __init__(
        self,
        session: Optional[SessionContext] = None,
        base_url: Optional[str] = None,
        navigate: Optional[Navigate] = None,
        notify: Optional[Notifier] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session or SessionContext()
        self.navigate = navigate or (lambda route: None)
        self.notify = notify or Notifier()
        self.api = ApiClient(self.session, base_url=base_url, transport=transport)
        self._unsubscribe = self.session.subscribe(self._on_session_invalidated)

        self.auth = AuthAPI(self.api)
        self.listings = ListingsAPI(self.api)
        self.bookings = BookingsAPI(self.api)
        self.admin_bookings = AdminBookingsAPI(self.api)
        self.payments = PaymentsAPI(self.api)
        self.uploads = UploadsAPI(self.api)
        self.users = UsersAPI(self.api)
        self.reviews = ReviewsAPI(self.api)
        self.analytics = AnalyticsAPI(self.api)
        self.notifications = NotificationsAPI(self.api)
        self.messages = MessagesAPI(self.api)
        self.wishlist = WishlistAPI(self.api)

        self.auth_service = AuthService(
            self.auth, self.session, navigate=self.navigate, notify=self.notify
        )

    def _on_session_invalidated(self) -> None:
        logger.info("➡️ Session ended by the server, redirecting to login")
        self.navigate(Route.login())

    async def start(self) -> None:
        """Restore a persisted session, if any"""
        await self.auth_service.check_auth()

    async def close(self) -> None:
        self._unsubscribe()
        await self.api.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
