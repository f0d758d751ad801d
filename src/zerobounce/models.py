"""Protocols and payload types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

from .status import ValidationStatus

T = TypeVar("T")


@dataclass(frozen=True)
class HttpResponse:
    """Raw result of one HTTP exchange."""

    status_code: int
    body: bytes


class Transport(Protocol):
    """Contract for the HTTP layer used by the client."""

    def get(self, url: str) -> HttpResponse:
        """Issue a GET request, raising TransportError when the exchange fails."""


@dataclass(frozen=True)
class CreditsPayload:
    """Remaining validation credits on the account."""

    credits: int


@dataclass(frozen=True)
class ValidatePayload:
    """Result of validating one email address."""

    address: str
    status: ValidationStatus
    sub_status: str
    free_email: bool
    processed_at: str
    did_you_mean: str | None = None
    account: str | None = None
    domain: str | None = None
    domain_age_days: str | None = None
    smtp_provider: str | None = None
    mx_record: str | None = None
    # "true"/"false" as sent by the service, not a bool
    mx_found: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    gender: str | None = None
    country: str | None = None
    region: str | None = None
    city: str | None = None
    zipcode: str | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    """The endpoint answered with its payload."""

    payload: T


@dataclass(frozen=True)
class ApiError:
    """The service answered but rejected the request."""

    message: str


Envelope = Union[Success[T], ApiError]
