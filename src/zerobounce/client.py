"""ZeroBounce API client."""

from __future__ import annotations

import ipaddress
import json
import logging
from collections.abc import Callable
from typing import Any, Union
from urllib.parse import urlencode

from .config import API_URL, ClientConfig
from .decoding import decode_credits, decode_validate, resolve_envelope
from .errors import TransportError
from .models import CreditsPayload, Envelope, T, Transport, ValidatePayload
from .transport import RequestsTransport, make_session

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address, str]


class ZeroBounceClient:
    """Client for the validate and getcredits endpoints.

    Both calls return an envelope: ``Success(payload)`` when the service
    answered with data, ``ApiError(message)`` when it rejected the request.
    Failed exchanges raise :class:`TransportError` and bodies of an
    unexpected shape raise :class:`DecodeError`.
    """

    def __init__(self, api_key: str, *, transport: Transport, api_url: str = API_URL) -> None:
        self._transport = transport
        self._api_key = api_key
        self._api_url = ""
        self.set_api_url(api_url)

    def set_api_url(self, api_url: str) -> ZeroBounceClient:
        self._api_url = api_url.rstrip("/")
        return self

    def get_api_url(self) -> str:
        return self._api_url

    def set_api_key(self, api_key: str) -> ZeroBounceClient:
        self._api_key = api_key
        return self

    def get_api_key(self) -> str:
        return self._api_key

    def validate(
        self, email: str, ip_address: IpAddress | None = None
    ) -> Envelope[ValidatePayload]:
        """Validate one address, optionally with the IP it signed up from."""
        params = {"api_key": self._api_key, "email": email}
        if ip_address is not None:
            params["ip_address"] = _format_ip(ip_address)
        return self._get("validate", params, decode_validate)

    def get_credits(self) -> Envelope[CreditsPayload]:
        """Return the number of validation credits left on the account."""
        return self._get("getcredits", {"api_key": self._api_key}, decode_credits)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def build_url(self, endpoint: str, params: dict[str, str]) -> str:
        return f"{self._api_url}/{endpoint}?{urlencode(params)}"

    def _get(
        self, endpoint: str, params: dict[str, str], decode_success: Callable[[Any], T]
    ) -> Envelope[T]:
        response = self._transport.get(self.build_url(endpoint, params))
        try:
            document = json.loads(response.body)
        except (ValueError, RecursionError) as exc:
            raise TransportError(
                f"HTTP {response.status_code} from {endpoint} with a non-JSON body",
                status_code=response.status_code,
            ) from exc
        return resolve_envelope(document, decode_success)


def _format_ip(ip_address: IpAddress) -> str:
    if isinstance(ip_address, str):
        ip_address = ipaddress.ip_address(ip_address.strip())
    if not isinstance(ip_address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        raise ValueError(f"not an IP address: {ip_address!r}")
    return str(ip_address)


def build_client(config: ClientConfig, *, logger: logging.Logger) -> ZeroBounceClient:
    """Wire a requests session and transport into a client."""
    transport = RequestsTransport(
        session=make_session(config.user_agent),
        timeout=config.timeout,
        logger=logger,
    )
    return ZeroBounceClient(config.api_key, transport=transport, api_url=config.api_url)
