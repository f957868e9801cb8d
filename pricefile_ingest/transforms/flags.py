"""
Flag and category helpers for pricefile-ingest.

- ``map_boolean_flag``: vendor ``Y``/``N`` columns -> ``"1"``/``""``.
- ``preserve_department``: keep the department the store already uses
  for an item when the vendor file reports a different one.
"""

from __future__ import annotations

from typing import Any

from pricefile_ingest.transforms.result import FieldResult

FLAG_TRUE = "1"
FLAG_FALSE = ""


def map_boolean_flag(value: Any, field: str = "TAX1") -> FieldResult:
    """Map a Y/N flag cell.

    Case and surrounding whitespace are ignored. ``Y`` -> ``"1"``,
    ``N`` or empty -> ``""``. Any other value is passed through
    unchanged (not upper-cased) with an ``unexpected value`` warning.

    Args:
        value: Raw cell value.
        field: Column name used in the warning text.
    """
    if value is None or value == "":
        return FieldResult(FLAG_FALSE)

    flag = str(value).strip().upper()
    if flag == "Y":
        return FieldResult(FLAG_TRUE)
    if flag == "N" or flag == "":
        return FieldResult(FLAG_FALSE)
    return FieldResult(
        str(value),
        f'{field} has unexpected value: "{value}" (expected Y or N)',
    )


def preserve_department(incoming: Any, original: Any) -> FieldResult:
    """Resolve the output department against the store's original value.

    - No original supplied: the incoming value is used, no warning.
    - Original differs from incoming: the original wins and a warning
      names both values.
    - Values match: incoming is used, no warning.
    """
    incoming_text = "" if incoming is None else str(incoming)
    if original is None or original == "":
        return FieldResult(incoming_text)

    original_text = str(original)
    if incoming_text != original_text:
        return FieldResult(
            original_text,
            f'Department ID changed from "{original_text}" to "{incoming_text}" '
            "- using original value",
        )
    return FieldResult(incoming_text)
