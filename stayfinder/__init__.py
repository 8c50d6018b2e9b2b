"""Python client for the StayFinder rental marketplace API"""

from .client import StayFinder
from .session import FileTokenStore, MemoryTokenStore, SessionContext

__all__ = ["StayFinder", "SessionContext", "FileTokenStore", "MemoryTokenStore"]
