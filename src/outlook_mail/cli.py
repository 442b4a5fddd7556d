"""Command-line entry point for the Outlook mail adapter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from outlook_mail.core import (
    AppSettings,
    Attachment,
    configure_logging,
    load_app_settings,
)
from outlook_mail.core.interfaces import MailProvider
from outlook_mail.transport import OutlookClient, OutlookError


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Outlook mail adapter")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("info", help="Show the active configuration.")

    send = subparsers.add_parser("send", help="Send an HTML email.")
    send.add_argument("--to", required=True, help="Recipient address.")
    send.add_argument("--subject", required=True, help="Subject line.")
    send.add_argument(
        "--sender",
        default="",
        help="Sender address recorded in logs (the account decides the real one).",
    )
    body_group = send.add_mutually_exclusive_group(required=True)
    body_group.add_argument("--body", help="HTML body content.")
    body_group.add_argument(
        "--body-file", type=Path, help="File containing the HTML body."
    )
    send.add_argument(
        "--attach",
        dest="attachments",
        action="append",
        type=Path,
        default=[],
        help="File to attach; may be repeated.",
    )

    search = subparsers.add_parser(
        "search-sent", help="Search sent items by subject."
    )
    search.add_argument("--subject", required=True, help="Subject to search for.")
    search.add_argument("--to", default="", help="Recipient recorded in logs.")
    return parser


def execute(
    args: argparse.Namespace,
    settings: AppSettings,
    provider: MailProvider | None = None,
) -> int:
    """Execute the requested CLI command and return the exit status."""
    command = args.command or "info"
    if command == "info":
        _print_info(settings)
        return 0

    client = provider or OutlookClient(settings.outlook)
    try:
        if command == "send":
            return _run_send(client, args)
        if command == "search-sent":
            return _run_search(client, args)
    finally:
        if provider is None:
            client.close()
    return 2


def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    sys.exit(execute(args, settings))


def _print_info(settings: AppSettings) -> None:
    outlook = settings.outlook
    print(f"Outlook API: {outlook.base_url}")
    print(f"Timeout: {outlook.timeout_seconds:g}s")
    print(f"Access token: {'configured' if outlook.access_token else 'missing'}")


def _run_send(client: MailProvider, args: argparse.Namespace) -> int:
    """Send a message, attaching files when any were given."""
    try:
        body = args.body
        if args.body_file is not None:
            body = args.body_file.read_text(encoding="utf-8")
        if args.attachments:
            attachments = [Attachment.from_path(path) for path in args.attachments]
            client.send_email_with_attachments(
                args.sender, args.to, args.subject, body, attachments
            )
        else:
            client.send_email(args.sender, args.to, args.subject, body)
    except (OutlookError, OSError) as exc:
        print(f"Send failed: {exc}")
        return 1

    print(f"Email sent to {args.to}.")
    return 0


def _run_search(client: MailProvider, args: argparse.Namespace) -> int:
    try:
        client.get_email(args.to, args.subject)
    except OutlookError as exc:
        print(f"Search failed: {exc}")
        return 1
    print(f"Searched sent items for subject {args.subject!r}.")
    return 0


if __name__ == "__main__":
    main()
