"""
Base transformer ABC for pricefile-ingest.

All vendor transformers implement this interface. The contract is:
1. ``transform_row()`` takes one raw row, the run's deposit mapping and
   optional original item data, and returns a ``RowResult``.
2. ``RowResult.output_row`` has exactly the keys of
   ``get_output_columns()``, in that order, every value a string.
3. ``transform_row()`` is a pure function of its inputs: no I/O, no
   logging, no state kept between calls. Rows can be transformed in
   any order or concurrently.

Vendor metadata (display name, rule summaries) lives in the YAML files
under ``pricefile_ingest/vendors/`` and is never consulted here.
"""

from __future__ import annotations

import fnmatch
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from pricefile_ingest.exceptions import ContractViolationError

RawRow = Mapping[str, Any]
DepositMapping = Mapping[str, str]
OriginalData = Mapping[str, Mapping[str, Any]]


@dataclass
class RowResult:
    """Output of transforming one row.

    Attributes:
        output_row: Output column name -> string value.
        warnings: Data-quality warnings for this row, in the order found.
    """
    output_row: dict[str, str]
    warnings: list[str] = field(default_factory=list)


class VendorTransformer(ABC):
    """Abstract base class for per-vendor row transformers.

    Subclasses set ``vendor_id`` and ``dropped_columns`` and implement
    ``transform_row()`` and ``get_output_columns()``.
    """

    vendor_id: ClassVar[str] = ""
    dropped_columns: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def transform_row(
        self,
        row: RawRow,
        deposit_mapping: DepositMapping | None = None,
        original_data: OriginalData | None = None,
    ) -> RowResult:
        """Transform one raw vendor row.

        Args:
            row: Column name -> raw cell value (case-insensitive lookup).
            deposit_mapping: Read-only deposit key -> fee identifier.
            original_data: Optional item identifier -> original attributes
                (e.g., ``{"Department": "Snacks"}``).

        Returns:
            RowResult with every output column populated.
        """

    @abstractmethod
    def get_output_columns(self) -> list[str]:
        """Return the ordered output column names for this vendor."""

    def is_dropped_column(self, name: str) -> bool:
        """True if input column *name* is on this vendor's drop list.

        Matching is case-insensitive and supports glob entries such as
        ``FUTURE_*``.
        """
        lowered = name.lower()
        return any(
            fnmatch.fnmatchcase(lowered, pattern.lower())
            for pattern in self.dropped_columns
        )

    def check_output_row(self, output_row: Mapping[str, str]) -> None:
        """Verify *output_row* carries exactly this vendor's output columns.

        Raises:
            ContractViolationError: If any column is missing or unexpected.
        """
        expected = self.get_output_columns()
        missing = [c for c in expected if c not in output_row]
        extra = [c for c in output_row if c not in expected]
        if missing or extra:
            raise ContractViolationError(
                f"{type(self).__name__} produced a row that does not match "
                f"its output columns (missing={missing}, unexpected={extra})"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vendor_id={self.vendor_id!r})"
