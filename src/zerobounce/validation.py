"""Validation and runtime guardrails."""

from __future__ import annotations

from urllib.parse import urlparse

from .errors import ConfigError


def is_supported_url(url: str) -> bool:
    """Allow only absolute HTTP(S) URLs with a hostname."""
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_runtime_constraints(*, api_key: str, api_url: str, timeout: float) -> None:
    """Validate CLI/runtime configuration and raise ConfigError on invalid values."""
    if not api_key or not api_key.strip():
        raise ConfigError("Provide --api-key or set ZEROBOUNCE_API_KEY.")
    if not is_supported_url(api_url):
        raise ConfigError(f"--api-url must be an absolute http(s) URL, got {api_url!r}.")
    if timeout <= 0:
        raise ConfigError("--timeout must be > 0.")
