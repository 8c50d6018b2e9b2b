"""
View plumbing shared by every controller
Navigation requests and short user-facing notifications
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """A navigation target; the application maps names to screens"""

    name: str
    params: dict = field(default_factory=dict)

    @classmethod
    def login(cls) -> "Route":
        return cls("login")

    @classmethod
    def bookings(cls) -> "Route":
        return cls("bookings")

    @classmethod
    def payment(cls, booking_id: str) -> "Route":
        return cls("payment", {"booking_id": booking_id})

    @classmethod
    def booking_detail(cls, booking_id: str, payment: Optional[str] = None) -> "Route":
        params = {"booking_id": booking_id}
        if payment:
            params["payment"] = payment
        return cls("booking_detail", params)

    @classmethod
    def verify_otp(cls, email: str, is_registration: bool = False) -> "Route":
        return cls("verify_otp", {"email": email, "is_registration": is_registration})


Navigate = Callable[[Route], None]


@dataclass(frozen=True)
class Notification:
    level: str  # "success" | "error" | "info" | "warning"
    message: str


class Notifier:
    """Collects toast-style notifications and forwards them to an optional sink"""

    def __init__(self, sink: Optional[Callable[[Notification], None]] = None):
        self.sink = sink
        self.history: list[Notification] = []

    def _emit(self, level: str, message: str) -> None:
        notification = Notification(level, message)
        self.history.append(notification)
        log = logger.error if level == "error" else logger.info
        log(f"🔔 [{level}] {message}")
        if self.sink:
            self.sink(notification)

    def success(self, message: str) -> None:
        self._emit("success", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None


class ViewController:
    """
    Base for view controllers.

    A controller keeps receiving responses after unmount() but must not
    touch view state or notify; `mounted` is checked after every await.
    """

    def __init__(self, notify: Optional[Notifier] = None, navigate: Optional[Navigate] = None):
        self.notify = notify or Notifier()
        self._navigate = navigate
        self.mounted = True

    def unmount(self) -> None:
        self.mounted = False

    def navigate(self, route: Route) -> None:
        if self.mounted and self._navigate:
            self._navigate(route)
