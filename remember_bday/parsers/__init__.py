"""
Parsers sub-package for remember-bday.

Converts the raw text of a ``.vcf`` export into ``Contact`` values.

- base.py holds the ``Contact`` value type and the ``ParseState`` enum.
- quoted_printable.py decodes ``=XX`` escaped name fields.
- vcard.py implements the line-oriented record state machine.

Nothing in this package performs I/O or logs: parsing is a pure
function from text to a list of contacts (or the first error found).
"""

from remember_bday.parsers.base import Contact, ParseState
from remember_bday.parsers.quoted_printable import decode_quoted_printable
from remember_bday.parsers.vcard import VCardParser, parse_vcards

__all__ = [
    "Contact",
    "ParseState",
    "VCardParser",
    "decode_quoted_printable",
    "parse_vcards",
]
