"""
Custom exception hierarchy for pricefile-ingest.

Only run-level problems are exceptions. Per-row data-quality issues
(bad flags, unparseable dates, missing deposit mappings) are returned
as warning strings alongside the transformed row and never raised.

- UnknownVendorError: the requested vendor id is not registered.
- ConfigValidationError: a run config file is empty or inconsistent.
- ParsingError: an input or reference file cannot be read.
- ExportError: the output file cannot be written.
- ContractViolationError: a transformer emitted a row whose keys do not
  match its declared output columns (a programming error).
"""

from __future__ import annotations


class PricefileIngestError(Exception):
    """Base exception for all pricefile-ingest errors."""


class UnknownVendorError(PricefileIngestError):
    """Raised when a vendor id is requested that is not in the registry.

    The message names the requested id and every known id so the caller
    can fix the configuration. There is no fallback to a default vendor
    for an explicitly given id.
    """

    def __init__(self, vendor_id: str, available: list[str]) -> None:
        self.vendor_id = vendor_id
        self.available = sorted(available)
        super().__init__(
            f'Vendor "{vendor_id}" not found. '
            f"Available vendors: {', '.join(self.available) or '(none)'}"
        )


class ConfigValidationError(PricefileIngestError):
    """Raised when a run config file fails validation.

    This can happen if:
    - The YAML file is empty.
    - A required path is blank.
    """


class ParsingError(PricefileIngestError):
    """Raised when an input or reference file cannot be read.

    For example, an unsupported file extension or a corrupt workbook.
    """


class ExportError(PricefileIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """


class ContractViolationError(PricefileIngestError):
    """Raised when a transformed row does not carry exactly the vendor's
    output columns. Indicates a bug in a transformer, not bad input data.
    """
