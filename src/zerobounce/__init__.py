"""Client for the ZeroBounce email validation API."""

from .client import ZeroBounceClient, build_client
from .config import API_URL, ClientConfig
from .errors import ConfigError, DecodeError, TransportError, ZeroBounceError
from .models import (
    ApiError,
    CreditsPayload,
    Envelope,
    HttpResponse,
    Success,
    Transport,
    ValidatePayload,
)
from .status import SUB_STATUSES, ValidationStatus

__version__ = "0.1.0"

__all__ = [
    # Client
    "ZeroBounceClient",
    "build_client",
    "ClientConfig",
    "API_URL",
    # Types
    "Envelope",
    "Success",
    "ApiError",
    "CreditsPayload",
    "ValidatePayload",
    "ValidationStatus",
    "SUB_STATUSES",
    "Transport",
    "HttpResponse",
    # Exceptions
    "ZeroBounceError",
    "ConfigError",
    "TransportError",
    "DecodeError",
]
