"""
vCard parser for remember-bday.

Scans the text of a ``.vcf`` file top to bottom, one line at a time,
with a two-state machine:

  OUTSIDE --BEGIN:VCARD--> INSIDE --END:VCARD--> OUTSIDE

While INSIDE, three fields are recognised and everything else is
skipped:

  FN:<name>                                        plain display name
  FN;CHARSET=UTF-8;ENCODING=QUOTED-PRINTABLE:<qp>  encoded display name
  BDAY:<YYYY-MM-DD>                                birthday

The first structural or field error aborts the whole parse; no partial
result is returned. A second name field in the same record replaces the
first.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import date

from remember_bday.exceptions import (
    DecodeError,
    InvalidBirthDateError,
    InvalidNameError,
    MissingEndError,
    NoNameError,
    UnexpectedFieldError,
)
from remember_bday.parsers.base import Contact, ParseState
from remember_bday.parsers.quoted_printable import decode_quoted_printable

BEGIN_MARKER = "BEGIN:VCARD"
END_MARKER = "END:VCARD"

NAME_PREFIX = "FN:"
QP_NAME_PREFIX = "FN;CHARSET=UTF-8;ENCODING=QUOTED-PRINTABLE:"
BDAY_PREFIX = "BDAY:"

_BDAY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _iter_lines(contents: str) -> Iterator[str]:
    """Yield lines split on LF, dropping a trailing CR from each.

    A final newline terminates the last line rather than starting an
    empty one.
    """
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def parse_birthday(value: str) -> date:
    """Parse a ``BDAY`` value in strict ``YYYY-MM-DD`` form.

    Raises:
        InvalidBirthDateError: If the value has the wrong shape or does
            not name a real calendar date.
    """
    match = _BDAY_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidBirthDateError(f"'{value}' does not match YYYY-MM-DD")
    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidBirthDateError(str(exc)) from exc


class VCardParser:
    """Stateful scanner for a single parse.

    Use ``parse_vcards()`` unless you need to subclass; every call to
    ``parse()`` starts from a clean state.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.state = ParseState.OUTSIDE
        self._name: str | None = None
        self._birthday: date | None = None
        self._contacts: list[Contact] = []

    def parse(self, contents: str) -> list[Contact]:
        """Parse the full text of a ``.vcf`` file.

        Args:
            contents: File contents, already decoded to text.

        Returns:
            One ``Contact`` per record, in input order.

        Raises:
            UnexpectedFieldError: A marker or field line in the wrong state.
            MissingEndError: The last record is never closed.
            NoNameError: A record closes without a name.
            InvalidNameError: An encoded name cannot be decoded.
            InvalidBirthDateError: A birthday is not ``YYYY-MM-DD``.
        """
        self._reset()
        for line in _iter_lines(contents):
            self._feed(line)
        if self.state is ParseState.INSIDE:
            raise MissingEndError()

        contacts = self._contacts
        self._reset()
        return contacts

    # -- Transitions --------------------------------------------------------

    def _feed(self, line: str) -> None:
        if line == BEGIN_MARKER:
            self._begin()
        elif line == END_MARKER:
            self._end()
        else:
            self._field(line)

    def _begin(self) -> None:
        if self.state is not ParseState.OUTSIDE:
            raise UnexpectedFieldError(BEGIN_MARKER)
        self.state = ParseState.INSIDE
        self._name = None
        self._birthday = None

    def _end(self) -> None:
        if self.state is not ParseState.INSIDE:
            raise UnexpectedFieldError(END_MARKER)
        self.state = ParseState.OUTSIDE
        if not self._name:
            raise NoNameError()
        self._contacts.append(Contact(name=self._name, birthday=self._birthday))
        self._name = None
        self._birthday = None

    def _field(self, line: str) -> None:
        if self.state is not ParseState.INSIDE:
            raise UnexpectedFieldError("contents")

        if line.startswith(NAME_PREFIX):
            self._name = line[len(NAME_PREFIX):]
        elif line.startswith(QP_NAME_PREFIX):
            try:
                self._name = decode_quoted_printable(line[len(QP_NAME_PREFIX):])
            except DecodeError as exc:
                raise InvalidNameError(str(exc)) from exc
        elif line.startswith(BDAY_PREFIX):
            self._birthday = parse_birthday(line[len(BDAY_PREFIX):])
        # Unrecognised fields (VERSION, N, TEL, ...) are skipped.


def parse_vcards(contents: str) -> list[Contact]:
    """Parse vCard text into a list of contacts.

    Thin wrapper around ``VCardParser().parse()``.
    """
    return VCardParser().parse(contents)
