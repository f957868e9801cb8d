"""
Transformers sub-package for pricefile-ingest.

Contains one row transformer per supported vendor. Each converts a raw
vendor row into the fixed output layout the retail system imports.

Design: Strategy Pattern
- base.py defines the VendorTransformer ABC and the RowResult type.
- agne.py implements AgneTransformer (multi-field retail sheet with two
  special-pricing windows and deposit lookup).
- pine_state.py implements PineStateSpiritsTransformer (monthly spirits
  specials with padded codes and two-decimal prices).

The vendor registry (vendor_registry.py) maps vendor ids to these
classes at runtime.
"""

from pricefile_ingest.transformers.agne import AgneTransformer
from pricefile_ingest.transformers.base import RowResult, VendorTransformer
from pricefile_ingest.transformers.pine_state import PineStateSpiritsTransformer

__all__ = [
    "AgneTransformer",
    "PineStateSpiritsTransformer",
    "RowResult",
    "VendorTransformer",
]
