"""Custom exceptions for the ZeroBounce client."""

from __future__ import annotations


class ZeroBounceError(Exception):
    """Base exception for this project."""


class ConfigError(ZeroBounceError):
    """Raised when runtime configuration is invalid."""


class TransportError(ZeroBounceError):
    """Raised when an HTTP exchange fails or returns an unreadable body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ZeroBounceError):
    """Raised when a response body matches neither the payload nor the error shape."""
