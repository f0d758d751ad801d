"""Validation status vocabulary."""

from __future__ import annotations

from enum import Enum
from typing import Any

SUB_STATUSES = frozenset(
    {
        "antispam_system",
        "greylisted",
        "mail_server_temporary_error",
        "forcible_disconnect",
        "mail_server_did_not_respond",
        "timeout_exceeded",
        "failed_smtp_connection",
        "mailbox_quota_exceeded",
        "exception_occurred",
        "possible_trap",
        "role_based",
        "global_suppression",
        "mailbox_not_found",
        "no_dns_entries",
        "failed_syntax_check",
        "possible_typo",
        "unroutable_ip_address",
        "leading_period_removed",
        "does_not_accept_mail",
        "alias_address",
        "role_based_catch_all",
        "disposable",
        "toxic",
    }
)


class ValidationStatus(Enum):
    """Status assigned to an address by the validate endpoint.

    Member values are the canonical underscore spellings. The service sends
    ``catch-all`` for :attr:`CATCH_ALL`; every other member is spelled the
    same on the wire.
    """

    VALID = "valid"
    INVALID = "invalid"
    CATCH_ALL = "catch_all"
    UNKNOWN = "unknown"
    SPAMTRAP = "spamtrap"
    ABUSE = "abuse"
    DO_NOT_MAIL = "do_not_mail"

    @classmethod
    def parse(cls, wire_value: Any) -> ValidationStatus:
        """Map a wire spelling to a member; unrecognized input yields UNKNOWN."""
        if not isinstance(wire_value, str):
            return cls.UNKNOWN
        return _BY_SPELLING.get(wire_value, cls.UNKNOWN)

    @property
    def canonical_name(self) -> str:
        return self.value

    @property
    def wire_name(self) -> str:
        if self is ValidationStatus.CATCH_ALL:
            return "catch-all"
        return self.value

    def is_valid(self) -> bool:
        return self is ValidationStatus.VALID

    def is_invalid(self) -> bool:
        return self is ValidationStatus.INVALID

    def is_catch_all(self) -> bool:
        return self is ValidationStatus.CATCH_ALL

    def is_unknown(self) -> bool:
        return self is ValidationStatus.UNKNOWN

    def is_spamtrap(self) -> bool:
        return self is ValidationStatus.SPAMTRAP

    def is_abuse(self) -> bool:
        return self is ValidationStatus.ABUSE

    def is_do_not_mail(self) -> bool:
        return self is ValidationStatus.DO_NOT_MAIL


_BY_SPELLING: dict[str, ValidationStatus] = {
    **{member.wire_name: member for member in ValidationStatus},
    **{member.canonical_name: member for member in ValidationStatus},
}
