"""
Number parsing helpers for pricefile-ingest.

Vendor price files carry monetary values as text with currency symbols,
thousands separators and stray whitespace (``"$1,234.50 "``). These
helpers turn such cells into floats and back into the canonical string
forms the deposit mapping and output files use.

``parse_numeric_loose`` is deliberately forgiving: after dropping every
character other than digits, ``.`` and ``-`` it parses the longest
numeric prefix, so ``"1.2.3"`` yields ``1.2`` and ``"12-34"`` yields
``12``. Downstream rules rely on that behaviour; it is not validation.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")

_CENTS = Decimal("0.01")


def parse_numeric_loose(value: Any) -> float | None:
    """Parse a loosely formatted numeric cell.

    Steps:
    1. ``None`` or ``""`` -> ``None``.
    2. Remove every character except digits, ``.`` and ``-``.
    3. Parse the longest leading float literal of what remains.

    Args:
        value: Raw cell value (string or number).

    Returns:
        The parsed float, or ``None`` if nothing numeric is found.
    """
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return None if math.isnan(value) else float(value)

    cleaned = _NON_NUMERIC.sub("", str(value))
    match = _LEADING_FLOAT.match(cleaned)
    if not match:
        return None
    return float(match.group(0))


def numeric_key(value: float) -> str:
    """Render a float as the shortest string that round-trips.

    Whole numbers drop the fractional part (``5.0`` -> ``"5"``,
    ``0.30`` -> ``"0.3"``). Deposit amounts are keyed by this form.
    """
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_price(value: Any) -> str:
    """Format a price cell to exactly two decimal places.

    Uses decimal fixed-point rounding (half up), not string truncation:
    ``"45.1"`` -> ``"45.10"``, ``"$2.675"`` -> ``"2.68"``.

    Returns:
        The formatted price, or ``""`` when the cell is empty, has no
        numeric content or overflows to infinity.
    """
    numeric = parse_numeric_loose(value)
    if numeric is None or not math.isfinite(numeric):
        return ""
    rounded = Decimal(repr(numeric)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{rounded:.2f}"
