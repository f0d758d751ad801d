"""Decoders turning service JSON into typed payloads.

Each endpoint answers HTTP 200 both on success and when it rejects the
request, so the envelope is chosen by shape: the success schema is tried
first and the ``{"error": "..."}`` schema second. A document matching
neither raises :class:`DecodeError`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .errors import DecodeError
from .models import ApiError, CreditsPayload, Envelope, Success, T, ValidatePayload
from .status import ValidationStatus

MAX_CREDITS = 2**32 - 1
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

OPTIONAL_VALIDATE_FIELDS = (
    "did_you_mean",
    "account",
    "domain",
    "domain_age_days",
    "smtp_provider",
    "mx_record",
    "mx_found",
    "firstname",
    "lastname",
    "gender",
    "country",
    "region",
    "city",
    "zipcode",
)


def _require_object(document: Any) -> dict[str, Any]:
    if not isinstance(document, dict):
        raise DecodeError(f"expected a JSON object, got {type(document).__name__}")
    return document


def _required(document: dict[str, Any], field: str, kind: type) -> Any:
    if field not in document or document[field] is None:
        raise DecodeError(f"missing required field {field!r}")
    value = document[field]
    # bool is an int subclass; keep the check exact
    if type(value) is not kind:
        raise DecodeError(f"field {field!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _optional_str(document: dict[str, Any], field: str) -> str | None:
    value = document.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"field {field!r} must be str or null, got {type(value).__name__}")
    return value


def parse_credits(raw: str) -> int:
    """Parse the quoted credit count, falling back to 0 for anything non-numeric."""
    if not _UNSIGNED_RE.fullmatch(raw):
        return 0
    credits = int(raw)
    if credits > MAX_CREDITS:
        return 0
    return credits


def decode_credits(document: Any) -> CreditsPayload:
    """Decode a ``/getcredits`` success document."""
    data = _require_object(document)
    return CreditsPayload(credits=parse_credits(_required(data, "Credits", str)))


def decode_validate(document: Any) -> ValidatePayload:
    """Decode a ``/validate`` success document."""
    data = _require_object(document)
    address = _required(data, "address", str)
    status = _required(data, "status", str)
    sub_status = _required(data, "sub_status", str)
    free_email = _required(data, "free_email", bool)
    processed_at = _required(data, "processed_at", str)
    optional = {field: _optional_str(data, field) for field in OPTIONAL_VALIDATE_FIELDS}
    return ValidatePayload(
        address=address,
        status=ValidationStatus.parse(status),
        sub_status=sub_status,
        free_email=free_email,
        processed_at=processed_at,
        **optional,
    )


def decode_error(document: Any) -> ApiError:
    """Decode the shared ``{"error": "..."}`` document."""
    data = _require_object(document)
    return ApiError(message=_required(data, "error", str))


def resolve_envelope(document: Any, decode_success: Callable[[Any], T]) -> Envelope[T]:
    """Resolve a document into Success or ApiError, trying the success schema first."""
    try:
        return Success(decode_success(document))
    except DecodeError as success_exc:
        try:
            return decode_error(document)
        except DecodeError:
            raise DecodeError(
                f"response matches neither payload nor error shape: {success_exc}"
            ) from success_exc
