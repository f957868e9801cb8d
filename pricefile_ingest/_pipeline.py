"""
Internal run orchestration for pricefile-ingest.

Extracted from ``__init__.py`` so that ``transform_file()`` and the
demo script share the same read -> reference data -> transform ->
export sequence.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from pricefile_ingest.config import RunConfig
from pricefile_ingest.export import write_rows
from pricefile_ingest.pipeline import RowPipeline
from pricefile_ingest.reader import read_rows
from pricefile_ingest.reference import load_deposit_mapping, load_original_data

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome of one file-in/file-out run."""

    output_path: str
    vendor_id: str
    rows_processed: int
    rows_skipped: int
    warnings: list[str] = field(default_factory=list)


def build_output_path(config: RunConfig, now: datetime | None = None) -> Path:
    """``{output_dir}/{prefix}_{UTC timestamp}.{format}`` for *config*."""
    now = now or datetime.now(timezone.utc)
    stamp = now.strftime("%Y%m%dT%H%M%S%fZ")
    out = config.output
    return Path(out.output_dir) / f"{out.filename_prefix}_{stamp}.{out.output_format}"


def run_config(config: RunConfig) -> RunSummary:
    """Run one transformation described by *config*.

    Steps:
      1. Load the optional deposit mapping and original data files.
      2. Build the row pipeline (resolves the vendor before the input
         file is read).
      3. Read the input rows.
      4. Transform every non-blank row.
      5. Write the output file.

    Args:
        config: The validated RunConfig.

    Returns:
        ``RunSummary`` with the written path, counts and all row warnings.

    Raises:
        UnknownVendorError: If ``config.vendor_id`` is not registered.
        FileNotFoundError: If an input or reference file is missing.
        ParsingError: If an input or reference file cannot be read.
        ExportError: If the output file cannot be written.
    """
    logger.info(
        "run_config() -- input_path=%s, vendor_id=%s",
        config.input_path,
        config.vendor_id,
    )

    # Step 1-2: Reference data and pipeline
    deposit_mapping = (
        load_deposit_mapping(config.deposit_mapping_path)
        if config.deposit_mapping_path
        else None
    )
    original_data = (
        load_original_data(config.original_data_path)
        if config.original_data_path
        else None
    )
    pipeline = RowPipeline(
        vendor_id=config.vendor_id,
        deposit_mapping=deposit_mapping,
        original_data=original_data,
    )

    # Step 3-4: Read and transform
    rows = read_rows(config.input_path)
    result = pipeline.run(rows)

    # Step 5: Export
    output_path = write_rows(
        result.rows,
        result.columns,
        build_output_path(config),
        output_format=config.output.output_format,
    )

    logger.info("Run complete: wrote %s", output_path)
    if result.warnings:
        logger.warning(
            "%d data-quality warnings in %s (see RunSummary.warnings)",
            len(result.warnings),
            Path(config.input_path).name,
        )
    return RunSummary(
        output_path=output_path,
        vendor_id=result.vendor_id,
        rows_processed=result.rows_processed,
        rows_skipped=result.rows_skipped,
        warnings=result.warnings,
    )
