"""
Date normalization for pricefile-ingest.

Vendor files mix compact (``20251201``), ISO-like (``2025-12-1``),
US (``12/1/2025``) and day-first (``1-12-2025``, ``1/12/25``) dates.
A ``DateFormat`` bundles the ordered list of accepted input patterns
with the output pattern a vendor's downstream file expects, so each
vendor transformer picks its own combination.

Validation is a plain range check (month 1-12, day 1-31); there is no
per-month day count, so ``2025-02-31`` is accepted. Two-digit years
below 50 map to 20YY, the rest to 19YY.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

from pricefile_ingest.transforms.result import FieldResult


@dataclass(frozen=True)
class DatePattern:
    """One accepted input layout.

    Attributes:
        name: Human-readable label (e.g., ``"M/D/YYYY"``).
        regex: Compiled pattern with exactly three capture groups.
        order: Which component each group holds (``"ymd"``, ``"mdy"``
            or ``"dmy"``).
    """
    name: str
    regex: re.Pattern[str]
    order: Literal["ymd", "mdy", "dmy"]

    def match(self, text: str) -> tuple[str, str, str] | None:
        """Return ``(year, month, day)`` strings if *text* matches."""
        m = self.regex.match(text)
        if not m:
            return None
        a, b, c = m.groups()
        if self.order == "ymd":
            year, month, day = a, b, c
        elif self.order == "mdy":
            month, day, year = a, b, c
        else:
            day, month, year = a, b, c
        if len(year) == 2:
            year = _expand_year(year)
        return year, month, day


def _pattern(name: str, regex: str, order: Literal["ymd", "mdy", "dmy"]) -> DatePattern:
    return DatePattern(name=name, regex=re.compile(regex), order=order)


YYYYMMDD = _pattern("YYYYMMDD", r"^(\d{4})(\d{2})(\d{2})$", "ymd")
YYYY_M_D = _pattern("YYYY-M-D", r"^(\d{4})-(\d{1,2})-(\d{1,2})$", "ymd")
M_D_YYYY = _pattern("M/D/YYYY", r"^(\d{1,2})/(\d{1,2})/(\d{4})$", "mdy")
D_M_YYYY_DASH = _pattern("D-M-YYYY", r"^(\d{1,2})-(\d{1,2})-(\d{4})$", "dmy")
D_M_YYYY_SLASH = _pattern("D/M/YYYY", r"^(\d{1,2})/(\d{1,2})/(\d{4})$", "dmy")
D_M_YY_SLASH = _pattern("D/M/YY", r"^(\d{1,2})/(\d{1,2})/(\d{2})$", "dmy")
D_M_YY_DASH = _pattern("D-M-YY", r"^(\d{1,2})-(\d{1,2})-(\d{2})$", "dmy")
M_D_YY_SLASH = _pattern("M/D/YY", r"^(\d{1,2})/(\d{1,2})/(\d{2})$", "mdy")

DEFAULT_PATTERNS: tuple[DatePattern, ...] = (
    YYYYMMDD,
    YYYY_M_D,
    M_D_YYYY,
    D_M_YYYY_DASH,
    D_M_YY_SLASH,
    D_M_YY_DASH,
)


@dataclass(frozen=True)
class DateFormat:
    """Input patterns plus output layout for one vendor.

    Attributes:
        output: Output layout using ``%Y``, ``%m`` and ``%d`` placeholders
            (e.g., ``"%Y%m%d"`` or ``"%d-%m-%Y"``).
        patterns: Accepted input patterns, tried in order.
        retry_on_invalid: If True, a pattern that matches but fails the
            month/day range check falls through to the next pattern.
            If False, the first matching pattern decides.
        strip_quotes: Remove one pair of surrounding quote characters
            before matching.
    """
    output: str = "%Y%m%d"
    patterns: tuple[DatePattern, ...] = DEFAULT_PATTERNS
    retry_on_invalid: bool = False
    strip_quotes: bool = False

    def render(self, year: str, month: str, day: str) -> str:
        return (
            self.output.replace("%Y", year)
            .replace("%m", month)
            .replace("%d", day)
        )


COMPACT_DATE = DateFormat()


def normalize_date(value: Any, date_format: DateFormat = COMPACT_DATE) -> FieldResult:
    """Normalize a date cell to the vendor's output layout.

    Args:
        value: Raw cell value.
        date_format: Accepted patterns and output layout.

    Returns:
        ``FieldResult`` with the rendered date, or ``""`` plus a
        ``Could not parse date`` warning when no pattern matches or the
        month/day are out of range. Empty input gives ``("", None)``.
    """
    if value is None:
        return FieldResult("")
    original = str(value)
    text = original.strip()
    if date_format.strip_quotes:
        text = re.sub(r"^['\"]|['\"]$", "", text).strip()
    if not text:
        return FieldResult("")

    for pattern in date_format.patterns:
        parts = pattern.match(text)
        if parts is None:
            continue
        year, month, day = parts
        month = month.zfill(2)
        day = day.zfill(2)
        if 1 <= int(month) <= 12 and 1 <= int(day) <= 31:
            return FieldResult(date_format.render(year, month, day))
        if not date_format.retry_on_invalid:
            break

    return FieldResult("", f'Could not parse date: "{original}"')


def _expand_year(two_digit: str) -> str:
    n = int(two_digit)
    century = "20" if n < 50 else "19"
    return f"{century}{n:02d}"
