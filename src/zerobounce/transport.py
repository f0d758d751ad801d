"""requests-backed transport."""

from __future__ import annotations

import logging
import re

from requests import Session
from requests.exceptions import RequestException

from .errors import TransportError
from .models import HttpResponse
from .validation import is_supported_url

_API_KEY_RE = re.compile(r"(api_key=)[^&\s]*")


def redact_api_key(url: str) -> str:
    """Hide the api_key query value before a URL reaches the logs."""
    return _API_KEY_RE.sub(r"\1***", url)


def make_session(user_agent: str) -> Session:
    """Create a requests session carrying the client User-Agent."""
    session = Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return session


class RequestsTransport:
    """Transport that issues GET requests through a requests session."""

    def __init__(self, *, session: Session, timeout: float, logger: logging.Logger) -> None:
        self._session = session
        self._timeout = timeout
        self._logger = logger

    def get(self, url: str) -> HttpResponse:
        if not is_supported_url(url):
            raise TransportError(f"Unsupported URL: {redact_api_key(url)}")
        self._logger.debug("GET %s", redact_api_key(url))
        try:
            response = self._session.get(url, timeout=self._timeout)
        except RequestException as exc:
            detail = redact_api_key(str(exc))
            self._logger.debug("Request failed for %s: %s", redact_api_key(url), detail)
            raise TransportError(f"Request failed: {detail}") from exc
        self._logger.debug("HTTP %d from %s", response.status_code, redact_api_key(url))
        return HttpResponse(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        self._session.close()
