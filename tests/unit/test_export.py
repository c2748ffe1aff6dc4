"""
Unit tests for the exporter (remember_bday.export).

Tests DataFrame construction, CSV and Parquet export, directory
creation and error handling using pytest's tmp_path fixture.
"""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from remember_bday.exceptions import ExportError
from remember_bday.export import contacts_to_frame, export_contacts
from remember_bday.parsers.base import Contact


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_contacts() -> list[Contact]:
    return [
        Contact("Allice Test"),
        Contact("Bob Test", date(1980, 5, 7)),
        Contact("Täst"),
    ]


# ---------------------------------------------------------------------------
# contacts_to_frame
# ---------------------------------------------------------------------------

class TestContactsToFrame:
    """Tests for contacts_to_frame()."""

    def test_columns_and_order(self):
        df = contacts_to_frame(_make_contacts())
        assert list(df.columns) == ["name", "birthday"]
        assert list(df["name"]) == ["Allice Test", "Bob Test", "Täst"]

    def test_birthday_iso_or_missing(self):
        df = contacts_to_frame(_make_contacts())
        assert df["birthday"].iloc[1] == "1980-05-07"
        assert pd.isna(df["birthday"].iloc[0])
        assert pd.isna(df["birthday"].iloc[2])

    def test_empty(self):
        df = contacts_to_frame([])
        assert len(df) == 0
        assert list(df.columns) == ["name", "birthday"]


# ---------------------------------------------------------------------------
# export_contacts
# ---------------------------------------------------------------------------

class TestExportContacts:
    """Tests for export_contacts()."""

    def test_csv_round_trip(self, tmp_path):
        path = export_contacts(_make_contacts(), tmp_path / "contacts.csv")
        assert path.endswith("contacts.csv")

        loaded = pd.read_csv(path, encoding="utf-8-sig")
        assert list(loaded.columns) == ["name", "birthday"]
        assert loaded["name"].iloc[2] == "Täst"
        assert loaded["birthday"].iloc[1] == "1980-05-07"

    def test_csv_has_bom(self, tmp_path):
        path = tmp_path / "contacts.csv"
        export_contacts(_make_contacts(), path)
        assert path.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_parquet_round_trip(self, tmp_path):
        path = export_contacts(_make_contacts(), tmp_path / "contacts.parquet")
        loaded = pd.read_parquet(path)
        assert list(loaded["name"]) == ["Allice Test", "Bob Test", "Täst"]
        assert loaded["birthday"].iloc[1] == "1980-05-07"

    def test_explicit_format_overrides_suffix(self, tmp_path):
        path = tmp_path / "contacts.out"
        export_contacts(_make_contacts(), path, output_format="csv")
        assert pd.read_csv(path, encoding="utf-8-sig").shape == (3, 2)

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "contacts.csv"
        export_contacts(_make_contacts(), path)
        assert path.exists()

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_contacts(_make_contacts(), tmp_path / "contacts.xlsx")

    def test_write_failure_wrapped(self, tmp_path):
        """Writing onto an existing directory fails with ExportError."""
        target = tmp_path / "taken.csv"
        target.mkdir()
        with pytest.raises(ExportError, match="Failed to write taken.csv"):
            export_contacts(_make_contacts(), target)
