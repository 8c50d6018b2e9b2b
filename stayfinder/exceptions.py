"""Exceptions raised by the API client and the payment processor adapter"""

from typing import Any, Optional


class StayFinderError(Exception):
    """Base class for all client errors"""


class ApiError(StayFinderError):
    """Non-2xx response from the remote API"""

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Any] = None,
    ):
        super().__init__(message or f"Request failed with status {status_code}")
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def user_message(self, fallback: str) -> str:
        """Server-provided message when there is one, the caller's fallback otherwise"""
        return self.message or fallback


class NetworkError(ApiError):
    """No response received (connection failure or timeout)"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message=None, status_code=None)
        self.detail = message

    def __str__(self) -> str:
        return self.detail or "Network error"


class UnauthorizedError(ApiError):
    """401 from any endpoint; the session has already been invalidated"""


class PaymentProcessorError(StayFinderError):
    """Card confirmation rejected by the payment processor"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        decline_code: Optional[str] = None,
        param: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.decline_code = decline_code
        self.param = param
