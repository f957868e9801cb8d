"""
Product code normalization for pricefile-ingest.

Vendors disagree on which direction to fix UPC widths: some files carry
one extra leading zero that the downstream system does not want, others
lose leading zeros (spreadsheets store UPCs as numbers) and need them
restored. Both directions live here as separate functions; vendor
transformers choose one.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

_NON_DIGIT = re.compile(r"\D")
_SCIENTIFIC = re.compile(r"^[+-]?\d+(?:\.\d+)?[eE][+-]?\d+$")
_DIGITS = re.compile(r"^\d+$")

# Longest integer a scientific-notation UPC may expand to.
MAX_EXPANDED_DIGITS = 20


def normalize_leading_zero_upc(value: Any) -> Any:
    """Strip exactly one leading ``'0'`` from a UPC.

    ``"012345"`` -> ``"12345"``, ``"0012345"`` -> ``"012345"``,
    ``"12345"`` -> ``"12345"``. Numbers are converted with ``str()``
    first. Empty and missing values are returned unchanged.
    """
    if value is None or value == "":
        return value
    upc = str(value).strip()
    if upc.startswith("0"):
        return upc[1:]
    return upc


def pad_upc(value: Any, width: int = 13) -> str:
    """Left-pad a UPC with zeros up to *width* digits.

    Scientific notation (``"8.52735003210E+11"``, as spreadsheets export
    long numbers) is expanded first, then every non-digit is removed.
    A value whose expansion would exceed ``MAX_EXPANDED_DIGITS`` digits
    is treated as garbled.
    Codes already *width* digits or longer are returned unchanged.

    Returns:
        The padded digit string, or ``""`` if no digits remain or the
        value is garbled.
    """
    if value is None or value == "":
        return ""

    upc = str(value).strip()
    if _SCIENTIFIC.match(upc):
        number = Decimal(upc)
        if number.adjusted() >= MAX_EXPANDED_DIGITS:
            return ""
        upc = format(number, "f").split(".", 1)[0]

    digits = _NON_DIGIT.sub("", upc)
    if not digits:
        return ""
    if len(digits) >= width:
        return digits
    return digits.zfill(width)


def pad_item_number(value: Any, width: int = 6) -> str:
    """Zero-pad a purely numeric item number to *width*; keep others verbatim.

    ``"165"`` -> ``"000165"``, ``"000165"`` -> ``"000165"``,
    ``"AB-12"`` -> ``"AB-12"``. Surrounding whitespace is trimmed.
    """
    if value is None:
        return ""
    item = str(value).strip()
    if not item:
        return ""
    if _DIGITS.match(item):
        return item.zfill(width)
    return item
