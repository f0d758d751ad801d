import ipaddress
import json
import logging
from typing import Any
from urllib.parse import parse_qs, urlsplit

import pytest

from zerobounce.client import ZeroBounceClient, build_client
from zerobounce.config import API_URL, ClientConfig
from zerobounce.errors import DecodeError, TransportError
from zerobounce.models import ApiError, CreditsPayload, HttpResponse, Success
from zerobounce.status import ValidationStatus
from zerobounce.transport import RequestsTransport

VALIDATE_BODY: dict[str, Any] = {
    "address": "valid@example.com",
    "status": "valid",
    "sub_status": "",
    "free_email": False,
    "did_you_mean": None,
    "account": None,
    "domain": None,
    "domain_age_days": "9692",
    "smtp_provider": "example",
    "mx_found": "true",
    "mx_record": "mx.example.com",
    "firstname": "zero",
    "lastname": "bounce",
    "gender": "male",
    "country": None,
    "region": None,
    "city": None,
    "zipcode": None,
    "processed_at": "2024-01-01 00:00:00.000",
}


class FakeTransport:
    def __init__(self, responses: list[HttpResponse] | None = None, raise_error: bool = False) -> None:
        self._responses = responses or []
        self._raise_error = raise_error
        self.urls: list[str] = []
        self.closed = False

    def get(self, url: str) -> HttpResponse:
        self.urls.append(url)
        if self._raise_error:
            raise TransportError("network down")
        return self._responses.pop(0)

    def close(self) -> None:
        self.closed = True


def json_response(payload: Any, status_code: int = 200) -> HttpResponse:
    return HttpResponse(status_code=status_code, body=json.dumps(payload).encode("utf-8"))


def query_of(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


def test_default_api_url_and_key() -> None:
    client = ZeroBounceClient("test", transport=FakeTransport())
    assert client.get_api_url() == API_URL
    assert client.get_api_key() == "test"


def test_set_api_url_strips_trailing_slashes() -> None:
    client = ZeroBounceClient("test", transport=FakeTransport())
    assert client.set_api_url("https://example.com/") is client
    assert client.get_api_url() == "https://example.com"
    client.set_api_url("https://example.com/v2//")
    assert client.get_api_url() == "https://example.com/v2"


def test_constructor_normalizes_api_url() -> None:
    client = ZeroBounceClient("test", transport=FakeTransport(), api_url="https://example.com/")
    assert client.get_api_url() == "https://example.com"


def test_set_api_key() -> None:
    client = ZeroBounceClient("test", transport=FakeTransport())
    client.set_api_key("test 2")
    assert client.get_api_key() == "test 2"


def test_validate_success_builds_query_without_ip() -> None:
    transport = FakeTransport([json_response(VALIDATE_BODY)])
    client = ZeroBounceClient("key", transport=transport)
    envelope = client.validate("x@y.com", None)

    assert isinstance(envelope, Success)
    assert envelope.payload.status is ValidationStatus.VALID
    assert envelope.payload.mx_found == "true"
    assert envelope.payload.country is None

    (url,) = transport.urls
    assert url.startswith("https://api.zerobounce.net/v2/validate?")
    assert "ip_address" not in url
    assert query_of(url) == {"api_key": ["key"], "email": ["x@y.com"]}


def test_validate_passes_ip_address() -> None:
    transport = FakeTransport([json_response(VALIDATE_BODY), json_response(VALIDATE_BODY)])
    client = ZeroBounceClient("key", transport=transport)
    client.validate("x@y.com", "99.110.204.1")
    client.validate("x@y.com", ipaddress.ip_address("2001:db8::1"))
    assert query_of(transport.urls[0])["ip_address"] == ["99.110.204.1"]
    assert query_of(transport.urls[1])["ip_address"] == ["2001:db8::1"]


def test_validate_rejects_bad_ip_before_request() -> None:
    transport = FakeTransport()
    client = ZeroBounceClient("key", transport=transport)
    with pytest.raises(ValueError):
        client.validate("x@y.com", "not-an-ip")
    assert transport.urls == []


def test_validate_encodes_query_values() -> None:
    transport = FakeTransport([json_response(VALIDATE_BODY)])
    client = ZeroBounceClient("k&y", transport=transport)
    client.validate("first+last@example.com")
    assert query_of(transport.urls[0]) == {"api_key": ["k&y"], "email": ["first+last@example.com"]}


def test_validate_in_band_error() -> None:
    transport = FakeTransport([json_response({"error": "Invalid API Key"})])
    client = ZeroBounceClient("bad", transport=transport)
    assert client.validate("x@y.com") == ApiError(message="Invalid API Key")


def test_get_credits_success_and_fallback() -> None:
    transport = FakeTransport([json_response({"Credits": "2375323"}), json_response({"Credits": "-1"})])
    client = ZeroBounceClient("key", transport=transport)
    assert client.get_credits() == Success(CreditsPayload(credits=2375323))
    assert client.get_credits() == Success(CreditsPayload(credits=0))
    assert transport.urls[0] == "https://api.zerobounce.net/v2/getcredits?api_key=key"


def test_get_credits_uses_custom_api_url() -> None:
    transport = FakeTransport([json_response({"Credits": "1"})])
    client = ZeroBounceClient("key", transport=transport).set_api_url("https://example.com/")
    client.get_credits()
    assert transport.urls == ["https://example.com/getcredits?api_key=key"]


def test_transport_failure_propagates() -> None:
    client = ZeroBounceClient("key", transport=FakeTransport(raise_error=True))
    with pytest.raises(TransportError):
        client.get_credits()


def test_non_json_body_is_transport_error() -> None:
    transport = FakeTransport([HttpResponse(status_code=502, body=b"<html>Bad gateway</html>")])
    client = ZeroBounceClient("key", transport=transport)
    with pytest.raises(TransportError) as excinfo:
        client.get_credits()
    assert excinfo.value.status_code == 502


def test_non_utf8_body_is_transport_error() -> None:
    transport = FakeTransport([HttpResponse(status_code=200, body=b"\xff\xfe\xfa")])
    client = ZeroBounceClient("key", transport=transport)
    with pytest.raises(TransportError) as excinfo:
        client.get_credits()
    assert excinfo.value.status_code == 200


def test_deeply_nested_body_is_transport_error() -> None:
    transport = FakeTransport([HttpResponse(status_code=200, body=b"[" * 200000)])
    client = ZeroBounceClient("key", transport=transport)
    with pytest.raises(TransportError) as excinfo:
        client.get_credits()
    assert excinfo.value.status_code == 200



def test_unexpected_shape_is_decode_error() -> None:
    transport = FakeTransport([json_response({"Message": "Something else"})])
    client = ZeroBounceClient("key", transport=transport)
    with pytest.raises(DecodeError):
        client.validate("x@y.com")


def test_close_delegates_to_transport() -> None:
    transport = FakeTransport()
    ZeroBounceClient("key", transport=transport).close()
    assert transport.closed is True


def test_build_client_wires_requests_transport() -> None:
    config = ClientConfig(api_key="key", api_url="https://example.com/v2/", timeout=3.0)
    client = build_client(config, logger=logging.getLogger("test"))
    assert client.get_api_url() == "https://example.com/v2"
    assert client.get_api_key() == "key"
    assert isinstance(client._transport, RequestsTransport)  # type: ignore[attr-defined]
    client.close()
