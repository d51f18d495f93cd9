# Exceptions raised by the client package. Each carries the free-text
# message shown to the person using the app.


class ClientError(Exception):
    """Base for every failure a client operation reports to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(ClientError):
    """The request never produced a usable response (transport failure,
    non-JSON body)."""


class BackendError(ClientError):
    """The backend answered with ``success: false``."""


class Unauthenticated(ClientError):
    """No session credential; detected before any request is sent."""


class SlotSelectionError(ClientError):
    """The selected day or time cannot be booked."""
