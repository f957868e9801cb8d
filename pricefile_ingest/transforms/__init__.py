"""
Transforms sub-package for pricefile-ingest.

Contains the small, pure value-level helpers that vendor transformers
compose into a full row mapping. None of these functions perform I/O,
log, or keep state; each takes raw cell values and returns a
normalized value (optionally with a warning string).

Modules:
  - columns.py: case-insensitive column lookup and alias resolution.
  - numbers.py: loose numeric parsing, numeric key rendering, price formatting.
  - dates.py: pattern-ordered date parsing with per-vendor output formats.
  - codes.py: UPC and item-number normalization (strip or pad).
  - flags.py: Y/N flag remapping and department preservation.
  - pricing.py: has-data gated special-pricing groups.
  - deposit.py: deposit fee lookup against a prebuilt mapping.

Two-part results use ``FieldResult`` (value + optional warning).
"""

from pricefile_ingest.transforms.result import FieldResult

__all__ = ["FieldResult"]
