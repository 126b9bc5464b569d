"""Failure kinds for a page fetch.

Every error carries a user-facing message (``str(exc)``) that the controller
shows verbatim in the error region.
"""


class FetchError(Exception):
    """Base class for anything that can go wrong while loading a page."""


class TransportError(FetchError):
    """The request never produced a response (DNS, connect, reset, ...)."""


class HttpStatusError(FetchError):
    """Upstream answered with a non-success status code."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP error: {status_code}")


class MalformedResponseError(FetchError):
    """Body was not JSON, or not the expected ``{"results": [...]}`` shape."""
