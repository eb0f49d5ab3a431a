"""
Error reporting for admin API calls.

Every failed request goes through one ErrorReporter. It logs the failure
and notifies its subscribers (typically the console's error banner) with
the APPLICATION_ERROR event and the error message.
"""
import logging
from typing import Any, Callable, Optional


logger = logging.getLogger(__name__)

APPLICATION_ERROR = "applicationError"

Subscriber = Callable[[str, str], None]


class ApiError(Exception):
    """A failed admin API request: non-2xx response or transport failure."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        payload: Any = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        self.payload = payload

    def __str__(self) -> str:
        status = self.status_code if self.status_code is not None else "network"
        return f"{self.method} {self.url} failed ({status}): {self.message}"


class ErrorReporter:
    """Single sink for API failures, with explicit subscriber registration."""

    def __init__(self):
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register `callback(event_name, message)`.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def handle(self, error: ApiError) -> None:
        """Log the error and broadcast its message to every subscriber."""
        logger.warning("%s", error)
        for callback in list(self._subscribers):
            callback(APPLICATION_ERROR, error.message)
