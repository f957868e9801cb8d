"""
Exporter for pricefile-ingest.

Writes transformed rows to a single output file in the configured
format (CSV or Parquet).

CSV is the default because the downstream point-of-sale import reads
CSV. It is written with ``utf-8-sig`` encoding (BOM) so Excel opens it
with the right encoding, every value is a string (UPCs keep their
leading zeros) and the column order is exactly the vendor's output
column order.

Parquet is offered for analysis; all columns are stored as strings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Literal

import pandas as pd

from pricefile_ingest.exceptions import ExportError

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def rows_to_dataframe(
    rows: Sequence[Mapping[str, str]],
    columns: Sequence[str],
) -> pd.DataFrame:
    """Build an all-string DataFrame with exactly *columns*, in order.

    Keys missing from a row become ``""``; keys not in *columns* are
    ignored.
    """
    df = pd.DataFrame(list(rows), columns=list(columns), dtype="object")
    return df.fillna("").astype(str)


def write_rows(
    rows: Sequence[Mapping[str, str]],
    columns: Sequence[str],
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
) -> str:
    """Write transformed rows to *path*.

    The parent directory is created if it does not exist. A run with
    no rows still writes the header (CSV) or an empty typed table
    (Parquet).

    Args:
        rows: Transformed rows.
        columns: Output column order.
        path: Destination file path (extension is not checked).
        output_format: ``"csv"`` or ``"parquet"``.

    Returns:
        The written path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = rows_to_dataframe(rows, columns)
    _write_dataframe(df, path, output_format)
    logger.info(
        "Exported %s (%d rows, %d cols)",
        path.name,
        len(df),
        len(df.columns),
    )
    return str(path)
