"""
pricefile-ingest: Python library for normalizing vendor price files.

Turns a vendor's price/promotion sheet (CSV or Excel) into the flat,
consistently formatted file a point-of-sale import expects. Each vendor
has a transformer that renames and drops columns, normalizes UPCs,
dates and prices, maps tax flags and deposit fees and derives special
pricing fields. Data-quality issues are reported as per-row warnings;
they never stop a run.

Public API surface:

- ``transform_file(input_path, ...)`` -- **recommended entry point**.
  Reads the file, loads optional reference files, transforms every row
  and writes ``{output_dir}/export_{timestamp}.csv``. Returns a
  ``RunSummary``.

- ``run_config(config)`` -- same, driven by a ``RunConfig`` (e.g. one
  loaded with ``load_config()`` from a YAML file).

- ``transform_rows(rows, vendor_id=...)`` / ``RowPipeline`` -- in-memory
  transformation of already-read rows. Returns a ``PipelineResult``.

- ``list_vendors()`` / ``get_transformer(vendor_id)`` -- registry access.
"""

from __future__ import annotations

import logging
from typing import Literal

from pricefile_ingest._pipeline import RunSummary, run_config
from pricefile_ingest.config import OutputConfig, RunConfig, load_config, save_config
from pricefile_ingest.pipeline import PipelineResult, RowPipeline, transform_rows
from pricefile_ingest.vendor_registry import get_transformer, list_vendors

__all__ = [
    "transform_file",
    "transform_rows",
    "run_config",
    "list_vendors",
    "get_transformer",
    "load_config",
    "save_config",
    "RowPipeline",
    "PipelineResult",
    "RunConfig",
    "RunSummary",
]

logger = logging.getLogger(__name__)


def transform_file(
    input_path: str,
    output_dir: str = "outputs/",
    vendor_id: str | None = None,
    deposit_mapping_path: str | None = None,
    original_data_path: str | None = None,
    output_format: Literal["csv", "parquet"] = "csv",
) -> RunSummary:
    """Transform one vendor price file and write the result.

    Args:
        input_path: Path to the vendor CSV/Excel file.
        output_dir: Directory the output file is written into.
        vendor_id: Vendor id (e.g. ``"AGNE"``). ``None`` selects the
            default vendor.
        deposit_mapping_path: Optional deposit mapping file.
        original_data_path: Optional original item data file, used to
            keep existing department assignments.
        output_format: ``"csv"`` (default) or ``"parquet"``.

    Returns:
        ``RunSummary`` with the output path, row counts and warnings.

    Raises:
        UnknownVendorError: If *vendor_id* is not registered.
        FileNotFoundError: If an input or reference file is missing.
        ParsingError: If an input or reference file cannot be read.
        ExportError: If the output file cannot be written.

    Examples::

        summary = pricefile_ingest.transform_file(
            "inputs/agne_weekly.csv",
            vendor_id="AGNE",
            deposit_mapping_path="inputs/deposits.csv",
        )
        for warning in summary.warnings:
            print(warning)
    """
    logger.info("transform_file() -- input_path=%s", input_path)
    config = RunConfig(
        input_path=input_path,
        vendor_id=vendor_id,
        deposit_mapping_path=deposit_mapping_path,
        original_data_path=original_data_path,
        output=OutputConfig(output_dir=output_dir, output_format=output_format),
    )
    return run_config(config)
