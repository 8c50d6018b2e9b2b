"""Auth service - login, registration and session restore on top of the session context"""

import logging
from typing import Optional

from ...exceptions import ApiError
from ...session import SessionContext
from ...shared.schemas import User
from ...shared.ui import Navigate, Notifier, Route
from .api import AuthAPI
from .schemas import LoginRequest, OTPVerification, RegisterRequest

logger = logging.getLogger(__name__)


class AuthService:
    """The only writer of the session token besides the API client's 401 handler"""

    def __init__(
        self,
        auth_api: AuthAPI,
        session: SessionContext,
        navigate: Optional[Navigate] = None,
        notify: Optional[Notifier] = None,
    ):
        self.auth_api = auth_api
        self.session = session
        self.navigate = navigate or (lambda route: None)
        self.notify = notify or Notifier()

    async def check_auth(self) -> Optional[User]:
        """Restore the user behind a persisted token; any failure drops the token"""
        if not self.session.token:
            self.session.user = None
            return None

        try:
            user = await self.auth_api.get_profile()
        except ApiError as e:
            logger.warning(f"⚠️ Stored session could not be restored: {e}")
            self.session.clear()
            return None

        self.session.user = user
        logger.info(f"✅ Session restored for {user.email} ({user.role})")
        return user

    def _start_session(self, token: str, user: User) -> None:
        self.session.set_token(token)
        self.session.user = user
        logger.info(f"✅ Logged in as {user.email} ({user.role})")

    async def login(self, email: str, password: str) -> bool:
        """Raises ApiError on rejection; unverified accounts are sent to OTP entry first"""
        credentials = LoginRequest(email=email, password=password)
        try:
            result = await self.auth_api.login(credentials)
        except ApiError as e:
            if isinstance(e.payload, dict) and e.payload.get("requiresVerification"):
                self.navigate(Route.verify_otp(credentials.email))
            raise

        self._start_session(result.token, result.user)
        return True

    async def register(self, data: RegisterRequest) -> bool:
        try:
            body = await self.auth_api.register(data)
        except ApiError as e:
            self.notify.error(e.user_message("Registration failed. Please try again."))
            raise

        if isinstance(body, dict) and body.get("success"):
            self.navigate(Route.verify_otp(data.email, is_registration=True))
            return True
        return False

    async def verify_registration_otp(self, email: str, otp: str) -> bool:
        try:
            result = await self.auth_api.verify_registration_otp(OTPVerification(email=email, otp=otp))
        except ApiError as e:
            self.notify.error(e.user_message("OTP verification failed. Please try again."))
            raise

        self._start_session(result.token, result.user)
        return True

    def logout(self) -> None:
        self.auth_api.logout()

    def update_user(self, user: User) -> None:
        self.session.user = user
