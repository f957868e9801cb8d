"""
Unit tests for input file reading (pricefile_ingest.reader).

CSV and Excel inputs are written into tmp_path; Excel files are built
with pandas/openpyxl.
"""

from __future__ import annotations

from datetime import datetime

import pandas as pd
import pytest

from pricefile_ingest.exceptions import ParsingError
from pricefile_ingest.reader import get_file_type, read_rows


class TestGetFileType:
    """Tests for get_file_type()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("prices.csv", "csv"),
            ("PRICES.CSV", "csv"),
            ("specials.xlsx", "excel"),
            ("old.xls", "excel"),
            ("notes.txt", "unknown"),
            ("noext", "unknown"),
        ],
    )
    def test_extensions(self, name, expected):
        assert get_file_type(name) == expected


class TestReadCsv:
    """CSV reading keeps every cell as text."""

    def test_values_kept_verbatim(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("Item,UPC,TAX1,WIC\n00165,012345,NA,\n", encoding="utf-8")
        rows = read_rows(path)
        assert rows == [{"Item": "00165", "UPC": "012345", "TAX1": "NA", "WIC": ""}]

    def test_bom_and_header_whitespace(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(" Item ,UPC\n1,2\n", encoding="utf-8-sig")
        assert read_rows(path) == [{"Item": "1", "UPC": "2"}]

    def test_quoted_commas(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text('Item,Description\n1,"COLA, 12PK"\n', encoding="utf-8")
        assert read_rows(path)[0]["Description"] == "COLA, 12PK"

    def test_limit(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("Item\n1\n2\n3\n", encoding="utf-8")
        assert [r["Item"] for r in read_rows(path, limit=2)] == ["1", "2"]
        assert len(read_rows(path, limit=0)) == 3


class TestReadExcel:
    """Excel reading renders cells as displayed text."""

    def test_first_sheet_as_text(self, tmp_path):
        path = tmp_path / "in.xlsx"
        df = pd.DataFrame({
            "Item #": [165, 2001],
            "UPC": [835229000108, None],
            "Retail": [24.99, 10.0],
            "Effective Start": [datetime(2025, 12, 1), datetime(2025, 12, 15)],
            "Description": ["ABSOLUT", "TITO'S"],
        })
        df.to_excel(path, index=False)

        rows = read_rows(path)
        assert rows[0] == {
            "Item #": "165",
            "UPC": "835229000108",
            "Retail": "24.99",
            "Effective Start": "2025-12-01",
            "Description": "ABSOLUT",
        }
        assert rows[1]["UPC"] == ""
        assert rows[1]["Retail"] == "10"


class TestReadErrors:
    """Error handling."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_rows(tmp_path / "nope.csv")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("Item\n1\n", encoding="utf-8")
        with pytest.raises(ParsingError, match="Unsupported file type"):
            read_rows(path)

    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "in.xlsx"
        path.write_bytes(b"not a zip file")
        with pytest.raises(ParsingError, match="in.xlsx"):
            read_rows(path)

    def test_corrupt_legacy_workbook(self, tmp_path):
        path = tmp_path / "old.xls"
        path.write_bytes(b"not a workbook")
        with pytest.raises(ParsingError, match="old.xls"):
            read_rows(path)
