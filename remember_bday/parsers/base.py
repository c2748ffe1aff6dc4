"""
Value types shared by the vCard parser and its callers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Contact:
    """One parsed vCard record.

    Attributes:
        name: Display name from the ``FN`` field (never empty).
        birthday: Date from the ``BDAY`` field, or ``None`` when the
            record has no birthday.
    """
    name: str
    birthday: date | None = None


class ParseState(enum.Enum):
    """Position of the parser relative to record delimiters."""
    OUTSIDE = "outside"
    INSIDE = "inside"
