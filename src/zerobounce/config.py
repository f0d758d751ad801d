"""Runtime configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import validate_runtime_constraints

API_URL = "https://api.zerobounce.net/v2"
DEFAULT_USER_AGENT = "zerobounce-client/0.1.0 (+https://www.zerobounce.net/docs/)"
DEFAULT_REQUEST_TIMEOUT = 15.0


@dataclass(frozen=True)
class ClientConfig:
    """Validated configuration used to build a client."""

    api_key: str
    api_url: str = API_URL
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            api_key=self.api_key,
            api_url=self.api_url,
            timeout=self.timeout,
        )
