"""
Deposit fee lookup for pricefile-ingest.

Bottle/container deposits are exported by vendors as amounts
(``"0.05"``, ``"$.30"``) while the downstream system wants a fee
identifier. The deposit mapping (built once per run, see
``pricefile_ingest.reference``) holds both amount keys and UPC/item
keys. Resolution order is fixed:

  1. the row's own deposit value, exactly as given (then trimmed);
  2. that value re-parsed as a number (``"0.30"`` -> ``"0.3"``);
  3. the row's normalized UPC, then its item identifier;
  4. nothing matched: ``""`` plus a warning naming the key tried.
     A row with neither UPC nor item gets ``""`` and no warning.

The lookup never raises and never mutates the mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pricefile_ingest.transforms.columns import text
from pricefile_ingest.transforms.numbers import numeric_key, parse_numeric_loose
from pricefile_ingest.transforms.result import FieldResult


def lookup_deposit(
    deposit_value: Any,
    upc: Any,
    item: Any,
    deposit_mapping: Mapping[str, str] | None,
) -> FieldResult:
    """Resolve a row's deposit to a fee identifier.

    Args:
        deposit_value: The row's existing deposit cell (may be empty).
        upc: The row's UPC, already normalized for this vendor.
        item: The row's item identifier.
        deposit_mapping: Lookup key -> fee identifier. ``None`` is
            treated as an empty mapping.

    Returns:
        ``FieldResult`` with the fee identifier, or ``""`` and a
        ``No deposit mapping found`` warning.
    """
    mapping: Mapping[str, str] = deposit_mapping or {}
    upc_key = text(upc).strip()
    item_key = text(item).strip()

    for key in _candidate_keys(deposit_value, upc_key, item_key):
        fee_id = mapping.get(key)
        if fee_id:
            return FieldResult(str(fee_id))

    failed_key = upc_key or item_key
    if not failed_key:
        return FieldResult("")
    return FieldResult("", f"No deposit mapping found for UPC/Item: {failed_key}")


def _candidate_keys(deposit_value: Any, upc_key: str, item_key: str) -> list[str]:
    keys: list[str] = []
    raw = text(deposit_value)
    if raw:
        keys.append(raw)
        if raw.strip() != raw:
            keys.append(raw.strip())
        amount = parse_numeric_loose(raw)
        if amount is not None:
            keys.append(numeric_key(amount))
    if upc_key:
        keys.append(upc_key)
    if item_key:
        keys.append(item_key)
    return keys
