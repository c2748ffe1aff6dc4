"""
Shared test fixtures and sample vCard texts for remember-bday tests.

Sample inputs are module-level constants so unit tests can parse them
directly and integration tests can write them to ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from remember_bday.exceptions import NotifierError
from remember_bday.notifications.base import Notifier

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------
SAMPLE_VCF = """\
BEGIN:VCARD
VERSION:2.1
N:Test;Allice;;;
FN:Allice Test
TEL;CELL:+01234567890
END:VCARD
BEGIN:VCARD
VERSION:2.1
N:Test;Bob;;;
FN:Bob Test
BDAY:1980-05-07
END:VCARD
BEGIN:VCARD
VERSION:2.1
N:Täst;;;;
FN;CHARSET=UTF-8;ENCODING=QUOTED-PRINTABLE:=54=C3=A4=73=74
TEL;CELL:+01234567890
END:VCARD
"""

# Bob Test's birthday in SAMPLE_VCF
BOB_BIRTHDAY_MONTH = 5
BOB_BIRTHDAY_DAY = 7


# ---------------------------------------------------------------------------
# Notifier doubles
# ---------------------------------------------------------------------------
class RecordingNotifier(Notifier):
    """Collects messages; optionally fails on the N-th send (1-based)."""

    def __init__(self, fail_on: int | None = None) -> None:
        self.messages: list[str] = []
        self.fail_on = fail_on
        self.closed = False

    def send_notification(self, message: str) -> None:
        if self.fail_on is not None and len(self.messages) + 1 == self.fail_on:
            raise NotifierError("service unavailable")
        self.messages.append(message)

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def sample_vcf(tmp_path: Path) -> Path:
    """SAMPLE_VCF written to a temporary ``contacts.vcf``."""
    path = tmp_path / "contacts.vcf"
    path.write_text(SAMPLE_VCF, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: end-to-end tests through the CLI and the file system",
    )
