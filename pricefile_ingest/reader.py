"""
Input file reading for pricefile-ingest.

Turns a vendor price file (or a reference file such as the deposit
mapping) into a list of ``{column name: cell text}`` dicts, the row
shape every transformer consumes.

- **CSV**: ``pandas.read_csv`` with ``dtype=str`` and
  ``keep_default_na=False`` so cells stay exactly as written ("NA" and
  "" are not turned into NaN). A UTF-8 BOM is tolerated.
- **Excel** (``.xlsx`` / ``.xls``): the first sheet via
  ``pandas.read_excel`` (openpyxl for ``.xlsx``, xlrd for ``.xls``).
  Empty cells become ``""``, whole-number floats lose their ``.0`` and
  date cells are rendered as ``YYYY-MM-DD`` so the date transforms can
  read them. As with CSV, "NA"-like text is not treated as missing.

Header names are stripped of surrounding whitespace. Cell values are
left untouched; trimming is the transformers' job.
"""

from __future__ import annotations

import logging
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pandas as pd
import xlrd

from pricefile_ingest.exceptions import ParsingError

logger = logging.getLogger(__name__)

_CSV_EXTENSIONS = {".csv"}
_EXCEL_EXTENSIONS = {".xlsx", ".xls"}


def get_file_type(filename: str | Path) -> str:
    """Classify a file name by extension.

    Returns:
        ``"csv"``, ``"excel"`` or ``"unknown"``.
    """
    suffix = Path(filename).suffix.lower()
    if suffix in _CSV_EXTENSIONS:
        return "csv"
    if suffix in _EXCEL_EXTENSIONS:
        return "excel"
    return "unknown"


def read_rows(path: str | Path, limit: int = 0) -> list[dict[str, str]]:
    """Read a CSV or Excel file into a list of string-valued row dicts.

    Args:
        path: Input file path.
        limit: Maximum number of data rows to return (0 = all).

    Returns:
        Rows in file order, keyed by (stripped) header name.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParsingError: If the extension is unsupported or the file
            cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    file_type = get_file_type(path)
    if file_type == "unknown":
        raise ParsingError(
            f"Unsupported file type: '{path.suffix}'. "
            f"Supported: {sorted(_CSV_EXTENSIONS | _EXCEL_EXTENSIONS)}"
        )

    nrows = limit if limit > 0 else None
    try:
        if file_type == "csv":
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
                nrows=nrows,
            )
            rows = _frame_to_rows(df)
        else:
            df = pd.read_excel(
                path, sheet_name=0, dtype=object, keep_default_na=False, nrows=nrows
            )
            rows = [
                {col: _excel_cell_to_text(value) for col, value in row.items()}
                for row in _frame_to_rows(df)
            ]
    except (
        ValueError,
        OSError,
        UnicodeDecodeError,
        ImportError,
        zipfile.BadZipFile,
        xlrd.XLRDError,
    ) as exc:
        raise ParsingError(f"Failed to read {path.name}: {exc}") from exc

    logger.info("Read %d rows x %d columns from %s", len(rows), len(df.columns), path.name)
    return rows


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    df.columns = [str(c).strip() for c in df.columns]
    return df.to_dict(orient="records")


def _excel_cell_to_text(value: Any) -> str:
    """Render one Excel cell as the text a user sees in the sheet."""
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime, date)):
        if pd.isna(value):
            return ""
        return value.strftime("%Y-%m-%d")
    return str(value)
