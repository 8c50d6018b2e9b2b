"""Shared validation utilities"""

import re
from typing import Optional

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
OTP_PATTERN = r"^\d{6}$"
MIN_PASSWORD_LENGTH = 6


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    if not re.match(EMAIL_PATTERN, email):
        raise ValueError("Invalid email format")

    return email


def validate_password(password: str) -> str:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return password


def validate_otp(otp: str) -> str:
    """OTP codes are six digits; surrounding whitespace from copy/paste is dropped"""
    otp = otp.strip()
    if not re.match(OTP_PATTERN, otp):
        raise ValueError("OTP must be 6 digits")
    return otp
