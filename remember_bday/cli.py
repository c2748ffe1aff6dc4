"""
Command-line entry point for remember-bday.

Usage:
    remember-bday contacts.vcf                      # notify about today's birthdays
    remember-bday contacts.vcf --dry-run            # log messages, send nothing
    remember-bday contacts.vcf --today 2024-05-07   # pretend it is another day
    remember-bday contacts.vcf --export out.parquet # also dump parsed contacts

Environment:
    REMEMBER_BDAY_APP_ID   Application id for Windows toasts.

Every failure is logged to stderr and ends the process with status 1
(argparse usage errors exit with 2).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from datetime import date

from remember_bday import read_contacts
from remember_bday.birthdays import send_bday_notifications
from remember_bday.config import build_config, load_notification_config
from remember_bday.exceptions import (
    ConfigValidationError,
    ExportError,
    NotifierError,
    VCardError,
)
from remember_bday.export import export_contacts
from remember_bday.notifications import select_notifier

log = logging.getLogger("remember_bday")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remember-bday",
        description="Send a desktop notification for every contact whose birthday is today.",
    )
    parser.add_argument("file", help="Path to a vCard (.vcf) export")
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML file with notification settings (title, message_template, ...)",
    )
    parser.add_argument(
        "--today",
        type=_parse_date,
        metavar="YYYY-MM-DD",
        help="Date to check birthdays against (default: local date)",
    )
    parser.add_argument(
        "--export",
        metavar="PATH",
        help="Also write the parsed contacts to a .csv or .parquet file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log notification messages instead of sending them",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    if environ is None:
        environ = os.environ
    _setup_logging(args.verbose)

    # -- Configuration --
    try:
        notification = load_notification_config(args.config) if args.config else None
        config = build_config(args.file, environ, notification=notification)
    except (ConfigValidationError, FileNotFoundError) as exc:
        log.error("Problem parsing arguments: %s", exc)
        return 1

    # -- Read + parse --
    try:
        contacts = read_contacts(config.file_path)
    except VCardError as exc:
        log.error("Problem parsing contacts: %s", exc)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Problem reading file: %s", exc)
        return 1

    # -- Optional export --
    if args.export:
        try:
            export_contacts(contacts, args.export)
        except ExportError as exc:
            log.error("Problem exporting contacts: %s", exc)
            return 1

    # -- Notify --
    try:
        with select_notifier(config, dry_run=args.dry_run) as notifier:
            send_bday_notifications(
                notifier,
                contacts,
                today=args.today,
                template=config.notification.message_template,
            )
    except NotifierError as exc:
        log.error("Problem sending notifications: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
