"""
remember-bday: birthday reminders from a vCard address book export.

Public API surface:

- ``parse_vcards(contents)`` -- parse the text of a ``.vcf`` file into
  a list of ``Contact`` values. Pure; raises a ``VCardError`` subclass
  on the first malformed line.

- ``read_contacts(path)`` -- read a ``.vcf`` file from disk and parse it.

- ``run(config, notifier, ...)`` -- read the configured file and send a
  notification for every contact whose birthday is today.

The command-line entry point lives in ``remember_bday.cli``.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from remember_bday.birthdays import send_bday_notifications
from remember_bday.config import AppConfig, build_config
from remember_bday.exceptions import (
    ConfigValidationError,
    DecodeError,
    ExportError,
    InvalidBirthDateError,
    InvalidNameError,
    MissingEndError,
    NoNameError,
    NotifierError,
    RememberBdayError,
    UnexpectedFieldError,
    VCardError,
)
from remember_bday.notifications.base import Notifier
from remember_bday.parsers import Contact, decode_quoted_printable, parse_vcards

__all__ = [
    "AppConfig",
    "Contact",
    "ConfigValidationError",
    "DecodeError",
    "ExportError",
    "InvalidBirthDateError",
    "InvalidNameError",
    "MissingEndError",
    "NoNameError",
    "Notifier",
    "NotifierError",
    "RememberBdayError",
    "UnexpectedFieldError",
    "VCardError",
    "build_config",
    "decode_quoted_printable",
    "parse_vcards",
    "read_contacts",
    "run",
]

logger = logging.getLogger(__name__)


def read_contacts(path: str | Path) -> list[Contact]:
    """Read a ``.vcf`` file and parse it.

    The file is decoded as UTF-8; a leading byte-order mark is dropped.

    Raises:
        FileNotFoundError / OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.
        VCardError: If the contents are malformed.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        contents = f.read()
    contacts = parse_vcards(contents)
    logger.info("Parsed %d contacts from %s", len(contacts), path)
    return contacts


def run(
    config: AppConfig,
    notifier: Notifier,
    today: date | None = None,
) -> list[str]:
    """Read ``config.file_path`` and notify about today's birthdays.

    Orchestration:
      1. ``read_contacts()`` -> list of ``Contact``.
      2. ``send_bday_notifications()`` with the configured message template.

    Returns:
        The messages that were delivered.

    Raises:
        OSError: If the file cannot be read.
        VCardError: If the file is malformed.
        NotifierError: On the first delivery failure.
    """
    contacts = read_contacts(config.file_path)
    return send_bday_notifications(
        notifier,
        contacts,
        today=today,
        template=config.notification.message_template,
    )
