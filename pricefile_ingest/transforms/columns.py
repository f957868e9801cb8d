"""
Column lookup helpers for pricefile-ingest.

Vendor files are inconsistent about header casing (``UPC`` vs ``Upc``)
and sometimes about spelling (``TPR_RETAIL`` vs ``TRP_RETAIL``). These
helpers resolve a logical field name against a raw row without
mutating it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_column_value(row: Mapping[str, Any], name: str) -> Any:
    """Look up *name* in *row*, exact key first, then case-insensitively.

    When several keys differ only by case, the first one in the row's
    iteration order wins.

    Args:
        row: A raw input row (column name -> cell value).
        name: The column name to find.

    Returns:
        The cell value, or ``None`` if no column matches.
    """
    if name in row:
        return row[name]

    lower_name = name.lower()
    for key in row:
        if key.lower() == lower_name:
            return row[key]

    return None


def first_value(row: Mapping[str, Any], *names: str) -> Any:
    """Return the first non-empty value among several column aliases.

    Aliases are tried in the given order, each with
    :func:`get_column_value`. Empty strings and ``None`` are skipped,
    so ``first_value(row, "TPR_COST", "TRP_COST")`` falls back to the
    ``TRP`` spelling when the ``TPR`` column exists but is blank.

    Returns:
        The first truthy value, or ``None`` if every alias is absent or empty.
    """
    for name in names:
        value = get_column_value(row, name)
        if _has_value(value):
            return value
    return None


def text(value: Any) -> str:
    """Render a raw cell as an output string (``None`` -> ``""``)."""
    if value is None:
        return ""
    return str(value)


def is_blank_row(row: Mapping[str, Any]) -> bool:
    """True when every cell in *row* is empty or whitespace."""
    return not any(text(v).strip() for v in row.values())


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True
