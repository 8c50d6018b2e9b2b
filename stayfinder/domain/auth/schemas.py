"""Auth domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.schemas import User
from ...shared.validators import validate_email, validate_otp, validate_password


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return validate_email(v)


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    role: str = "guest"
    phoneNumber: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return validate_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)

    @field_validator("role")
    @classmethod
    def check_role(cls, v: str) -> str:
        # Admin accounts are never self-registered
        if v not in {"guest", "host"}:
            raise ValueError("role must be 'guest' or 'host'")
        return v


class OTPVerification(BaseModel):
    email: str
    otp: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return validate_email(v)

    @field_validator("otp")
    @classmethod
    def check_otp(cls, v: str) -> str:
        return validate_otp(v)


class ResetPasswordRequest(BaseModel):
    email: str
    otp: str
    password: str

    @field_validator("otp")
    @classmethod
    def check_otp(cls, v: str) -> str:
        return validate_otp(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)


class ChangePasswordRequest(BaseModel):
    currentPassword: str
    newPassword: str

    @field_validator("newPassword")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)


class AuthResult(BaseModel):
    """token + user pair returned by login and OTP verification"""

    token: str
    user: User
