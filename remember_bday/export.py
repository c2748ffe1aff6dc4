"""
Exporter for remember-bday.

Writes the parsed contacts as a two-column table (``name``,
``birthday``) in CSV or Parquet, so an address book can be inspected or
loaded into other tools.

CSV files are written with ``utf-8-sig`` encoding (BOM) so that
non-ASCII names display correctly when opened in Excel. Birthdays are
stored as ISO ``YYYY-MM-DD`` strings in both formats.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

import pandas as pd

from remember_bday.exceptions import ExportError
from remember_bday.parsers.base import Contact

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}

COLUMNS = ["name", "birthday"]


def contacts_to_frame(contacts: Iterable[Contact]) -> pd.DataFrame:
    """Build a DataFrame with one row per contact, in input order.

    Contacts without a birthday get a missing value in ``birthday``.
    """
    rows = [
        {
            "name": c.name,
            "birthday": c.birthday.isoformat() if c.birthday is not None else None,
        }
        for c in contacts
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def _resolve_format(path: Path, output_format: str | None) -> str:
    if output_format is None:
        output_format = path.suffix.lower().lstrip(".")
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )
    return output_format


def export_contacts(
    contacts: Iterable[Contact],
    path: str | Path,
    output_format: Literal["csv", "parquet"] | None = None,
) -> str:
    """Write contacts to *path*.

    Args:
        contacts: Parsed contacts.
        path: Destination file; parent directories are created.
        output_format: ``"csv"`` or ``"parquet"``. Inferred from the
            file suffix when ``None``.

    Returns:
        The path written, as a string.

    Raises:
        ExportError: If the format is unsupported or writing fails.
    """
    path = Path(path)
    fmt = _resolve_format(path, output_format)
    df = contacts_to_frame(contacts)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(f"Failed to write {path.name} as {fmt}: {exc}") from exc

    logger.info("Exported %d contacts -> %s", len(df), path)
    return str(path)
