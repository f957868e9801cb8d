"""
Row pipeline for pricefile-ingest.

Runs one vendor transformer over a sequence of raw rows:

1. **Resolve** the vendor (at construction, so an unknown id fails the
   run before any row is read).
2. **Skip** rows whose cells are all blank (spreadsheet padding).
3. **Transform** each remaining row with the vendor's transformer.
4. **Check** that the output row carries exactly the vendor's columns.
5. **Collect** warnings, prefixed with the 1-based index of the row
   among processed rows (``"Row 3: ..."``).

The deposit mapping and original item data are shared read-only by
every row. Warnings never stop processing; only vendor resolution and
contract violations raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import pandas as pd

from pricefile_ingest.export import rows_to_dataframe
from pricefile_ingest.transformers.base import (
    DepositMapping,
    OriginalData,
    RawRow,
    RowResult,
)
from pricefile_ingest.transforms.columns import is_blank_row
from pricefile_ingest.vendor_registry import (
    DEFAULT_VENDOR_ID,
    get_transformer,
    resolve_vendor_id,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Output of the row pipeline.

    Attributes:
        vendor_id: The vendor the rows were transformed for.
        columns: Output column order (from the vendor's transformer).
        rows: Transformed rows, in input order.
        warnings: Every row warning, prefixed ``"Row <n>: "``.
        rows_skipped: Number of blank input rows skipped.
    """

    vendor_id: str
    columns: list[str]
    rows: list[dict[str, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    rows_skipped: int = 0

    @property
    def rows_processed(self) -> int:
        return len(self.rows)

    def to_dataframe(self) -> pd.DataFrame:
        """Transformed rows as an all-string DataFrame in column order."""
        return rows_to_dataframe(self.rows, self.columns)


class RowPipeline:
    """Applies one vendor's transformer to a stream of raw rows.

    The pipeline holds no per-run state between ``run()`` calls; each
    call processes its rows independently.

    Args:
        vendor_id: Vendor to transform for. ``None`` (or blank) means
            "not specified" and selects *default_vendor*.
        deposit_mapping: Deposit key -> fee identifier, built before the run.
        original_data: Item identifier -> original attributes.
        default_vendor: Vendor used when *vendor_id* is not specified.

    Raises:
        UnknownVendorError: If the resolved vendor id is not registered.
    """

    def __init__(
        self,
        vendor_id: str | None = None,
        deposit_mapping: DepositMapping | None = None,
        original_data: OriginalData | None = None,
        default_vendor: str = DEFAULT_VENDOR_ID,
    ) -> None:
        self.vendor_id = resolve_vendor_id(vendor_id, default=default_vendor)
        self.transformer = get_transformer(self.vendor_id)
        self.deposit_mapping = deposit_mapping if deposit_mapping is not None else {}
        self.original_data = original_data
        logger.info(
            "Row pipeline ready: vendor=%s, %d deposit keys",
            self.vendor_id,
            len(self.deposit_mapping),
        )

    @property
    def columns(self) -> list[str]:
        return self.transformer.get_output_columns()

    def iter_rows(self, rows: Iterable[RawRow]) -> Iterator[RowResult]:
        """Yield a ``RowResult`` for every non-blank row in *rows*.

        Warnings in the yielded results are not prefixed.
        """
        for result in self._transform_each(rows):
            if result is not None:
                yield result

    def run(self, rows: Iterable[RawRow]) -> PipelineResult:
        """Transform all rows and aggregate their warnings.

        Args:
            rows: Raw rows in file order.

        Returns:
            ``PipelineResult`` with transformed rows and prefixed warnings.
        """
        result = PipelineResult(vendor_id=self.vendor_id, columns=self.columns)

        for row_result in self._transform_each(rows):
            if row_result is None:
                result.rows_skipped += 1
                continue
            result.rows.append(row_result.output_row)
            row_number = len(result.rows)
            result.warnings.extend(f"Row {row_number}: {w}" for w in row_result.warnings)

        logger.info(
            "Transformed %d rows for %s (%d skipped, %d warnings)",
            result.rows_processed,
            self.vendor_id,
            result.rows_skipped,
            len(result.warnings),
        )
        return result

    def _transform_each(self, rows: Iterable[RawRow]) -> Iterator[RowResult | None]:
        """Yield a checked ``RowResult`` per row, or ``None`` for a blank row."""
        for row in rows:
            if is_blank_row(row):
                yield None
                continue
            result = self.transformer.transform_row(
                row, self.deposit_mapping, self.original_data
            )
            self.transformer.check_output_row(result.output_row)
            yield result


def transform_rows(
    rows: Iterable[RawRow],
    vendor_id: str | None = None,
    deposit_mapping: DepositMapping | None = None,
    original_data: OriginalData | None = None,
    default_vendor: str = DEFAULT_VENDOR_ID,
) -> PipelineResult:
    """Convenience wrapper: build a ``RowPipeline`` and run it once."""
    pipeline = RowPipeline(
        vendor_id=vendor_id,
        deposit_mapping=deposit_mapping,
        original_data=original_data,
        default_vendor=default_vendor,
    )
    return pipeline.run(rows)
