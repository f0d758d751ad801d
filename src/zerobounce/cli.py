"""CLI entrypoint for zerobounce."""

from __future__ import annotations

import argparse
import dataclasses
import json
import os
from collections.abc import Sequence
from typing import Any

from .client import ZeroBounceClient, build_client
from .config import API_URL, DEFAULT_REQUEST_TIMEOUT, ClientConfig
from .errors import ConfigError, DecodeError, TransportError
from .logging_utils import configure_logging, get_logger
from .models import ApiError, CreditsPayload, Envelope, ValidatePayload
from .status import ValidationStatus

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE = 2
EXIT_FAILURE = 3


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="zerobounce",
        description="ZeroBounce client - validate addresses and check account credits.",
    )
    parser.add_argument("--api-key", help="API key (or set ZEROBOUNCE_API_KEY env var).")
    parser.add_argument(
        "--api-url", help=f"Base API URL (or set ZEROBOUNCE_API_URL; default {API_URL})."
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="Per-request timeout in seconds.",
    )
    parser.add_argument("--json", action="store_true", help="Print the payload as JSON.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    commands = parser.add_subparsers(dest="command", required=True)
    validate = commands.add_parser("validate", help="Validate one email address.")
    validate.add_argument("email", help="Address to validate.")
    validate.add_argument("--ip-address", help="IP address the address signed up from.")
    commands.add_parser("credits", help="Show remaining validation credits.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI input."""
    return build_parser().parse_args(argv)


def namespace_to_config(args: argparse.Namespace) -> ClientConfig:
    """Convert CLI args to validated ClientConfig."""
    api_key = args.api_key or os.getenv("ZEROBOUNCE_API_KEY") or ""
    api_url = args.api_url or os.getenv("ZEROBOUNCE_API_URL") or API_URL
    return ClientConfig(api_key=api_key, api_url=api_url, timeout=args.timeout)


def payload_to_dict(payload: ValidatePayload | CreditsPayload) -> dict[str, Any]:
    """Render a payload as JSON-ready data, with status in canonical spelling."""
    data = dataclasses.asdict(payload)
    status = data.get("status")
    if isinstance(status, ValidationStatus):
        data["status"] = status.canonical_name
    return data


def format_validate(payload: ValidatePayload) -> str:
    lines = [
        f"Email:       {payload.address}",
        f"Status:      {payload.status.canonical_name}",
        f"Sub-status:  {payload.sub_status or '-'}",
        f"Free email:  {'yes' if payload.free_email else 'no'}",
        f"MX found:    {payload.mx_found or '-'}",
        f"MX record:   {payload.mx_record or '-'}",
    ]
    if payload.did_you_mean:
        lines.append(f"Did you mean: {payload.did_you_mean}")
    lines.append(f"Processed:   {payload.processed_at}")
    return "\n".join(lines)


def format_credits(payload: CreditsPayload) -> str:
    return f"Credits:     {payload.credits}"


def render(envelope: Envelope[Any], *, as_json: bool) -> tuple[str, int]:
    """Return output text and exit code for an envelope."""
    if isinstance(envelope, ApiError):
        if as_json:
            return json.dumps({"error": envelope.message}), EXIT_API_ERROR
        return f"Error: {envelope.message}", EXIT_API_ERROR
    payload = envelope.payload
    if as_json:
        return json.dumps(payload_to_dict(payload), indent=2), EXIT_OK
    if isinstance(payload, ValidatePayload):
        return format_validate(payload), EXIT_OK
    return format_credits(payload), EXIT_OK


def run_command(client: ZeroBounceClient, args: argparse.Namespace) -> Envelope[Any]:
    """Dispatch the selected subcommand."""
    if args.command == "validate":
        return client.validate(args.email, args.ip_address)
    return client.get_credits()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = get_logger()
    try:
        config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_USAGE

    client = build_client(config, logger=logger)
    try:
        envelope = run_command(client, args)
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_USAGE
    except (TransportError, DecodeError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return EXIT_FAILURE
    finally:
        client.close()

    output, exit_code = render(envelope, as_json=args.json)
    print(output)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
