"""Errors raised by the API gateway."""

from typing import Any


class ApiError(Exception):
    """Base class for every failure surfaced by the API gateway."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


class HttpError(ApiError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, status: int, url: str = "", body: Any = None):
        super().__init__(message, status)
        self.url = url
        self.body = body

    def __str__(self) -> str:
        return f"HTTP {self.status}: {self.message}"


class AuthenticationFailed(HttpError):
    """The server rejected the credentials or the session expired (401)."""


class NetworkUnavailableError(ApiError):
    """The request never reached the server."""


class RequestTimeoutError(NetworkUnavailableError):
    """The server took too long to respond."""
