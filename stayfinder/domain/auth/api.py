"""Auth API"""

import logging

from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import User, parse_model
from .schemas import (
    AuthResult,
    ChangePasswordRequest,
    LoginRequest,
    OTPVerification,
    RegisterRequest,
    ResetPasswordRequest,
)

logger = logging.getLogger(__name__)


def _user_from(data) -> User:
    # Profile endpoints wrap the user as {"user": {...}}
    if isinstance(data, dict) and isinstance(data.get("user"), dict):
        data = data["user"]
    return parse_model(User, data)


class AuthAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def login(self, credentials: LoginRequest) -> AuthResult:
        body = await self.client.post("/auth/login", json=credentials.model_dump())
        return parse_model(AuthResult, unwrap_data(body))

    async def register(self, data: RegisterRequest) -> dict:
        body = await self.client.post("/auth/register", json=data.model_dump(exclude_none=True))
        logger.info(f"📝 Registration submitted for {data.email}")
        return body

    async def verify_otp(self, data: OTPVerification) -> AuthResult:
        body = await self.client.post("/auth/verify-otp", json=data.model_dump())
        return parse_model(AuthResult, unwrap_data(body))

    async def verify_registration_otp(self, data: OTPVerification) -> AuthResult:
        body = await self.client.post("/auth/verify-registration", json=data.model_dump())
        return parse_model(AuthResult, unwrap_data(body))

    async def resend_otp(self, email: str) -> dict:
        return await self.client.post("/auth/resend-otp", json={"email": email})

    async def forgot_password(self, email: str) -> dict:
        return await self.client.post("/auth/forgot-password", json={"email": email})

    async def reset_password(self, data: ResetPasswordRequest) -> dict:
        return await self.client.post("/auth/reset-password", json=data.model_dump())

    async def get_profile(self) -> User:
        body = await self.client.get("/auth/profile")
        return _user_from(unwrap_data(body))

    async def update_profile(self, data: dict) -> User:
        body = await self.client.put("/auth/profile", json=data)
        return _user_from(unwrap_data(body))

    async def change_password(self, data: ChangePasswordRequest) -> dict:
        return await self.client.put("/auth/change-password", json=data.model_dump())

    def logout(self) -> None:
        """Local only: the server keeps no session to end"""
        self.client.session.clear()
        logger.info("👋 Logged out")
