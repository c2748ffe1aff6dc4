"""
Custom exception hierarchy for remember-bday.

Why a custom hierarchy:
- Callers can catch specific exceptions (e.g., NoNameError vs
  InvalidBirthDateError) without matching on message text.
- Parser errors carry their payload (``field`` / ``reason``) as
  attributes, so tests and the CLI can inspect *which* marker was
  unexpected or *why* a date failed to parse.
"""

from __future__ import annotations


class RememberBdayError(Exception):
    """Base exception for all remember-bday errors."""


# ---------------------------------------------------------------------------
# Parser errors
# ---------------------------------------------------------------------------

class VCardError(RememberBdayError):
    """Base class for every error raised by the vCard parser.

    The set of subclasses is closed: a parse either succeeds or raises
    exactly one of the five errors below. Two errors are equal when they
    are the same class and carry the same payload.
    """

    def _payload(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class UnexpectedFieldError(VCardError):
    """A marker or content line appeared in a state where it is illegal.

    ``field`` names the offending construct: ``"BEGIN:VCARD"``,
    ``"END:VCARD"`` or ``"contents"``.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unexpected {field}")

    def _payload(self) -> tuple:
        return (self.field,)


class MissingEndError(VCardError):
    """Input ended while a record was still open."""

    def __init__(self) -> None:
        super().__init__("Missing END:VCARD")


class NoNameError(VCardError):
    """A record was closed without a name having been set."""

    def __init__(self) -> None:
        super().__init__("No name at end of vcard")


class InvalidNameError(VCardError):
    """A quoted-printable name field could not be decoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error while parsing name: {reason}")

    def _payload(self) -> tuple:
        return (self.reason,)


class InvalidBirthDateError(VCardError):
    """A ``BDAY:`` field is not a valid ``YYYY-MM-DD`` calendar date."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error while parsing bday: {reason}")

    def _payload(self) -> tuple:
        return (self.reason,)


class DecodeError(RememberBdayError, ValueError):
    """Raised by the quoted-printable decoder on malformed input.

    The parser never lets this escape; it is re-raised as
    ``InvalidNameError`` with the decode error as ``__cause__``.
    """


# ---------------------------------------------------------------------------
# Application errors
# ---------------------------------------------------------------------------

class ConfigValidationError(RememberBdayError):
    """Raised when command-line arguments or the settings YAML are invalid.

    This can happen if:
    - The input path does not name a ``.vcf`` file.
    - The settings file is empty or fails schema validation.
    """


class NotifierError(RememberBdayError):
    """Raised when a notification could not be delivered.

    The message is opaque: it wraps whatever the platform service
    reported (D-Bus error name, toast API failure, ...).
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Error while sending a notification: {message}")


class ExportError(RememberBdayError):
    """Raised when the exporter fails to write the contacts table.

    For example, permission errors, disk full, or unsupported format.
    """
