"""
Special-pricing group derivation for pricefile-ingest.

A special-pricing group is one promotion window in a vendor file: a
per-unit special price, a cost, a start and end date, and a multiplier
(``SALE_MULTIPLE``/``TPR_MULTIPLE``). The downstream system wants it as
seven columns: method flag, per-unit price, quantity, deal price, start
date, end date, cost.

Rules:
  1. **Has-data gating**: the derived fields (method, price, quantity,
     deal price) are filled only if the special price, cost, start date
     or end date is non-empty, or the multiplier parses to > 0.
     Otherwise all four are ``""``. Never ``"0"``: a zero method flag
     means "flat price confirmed", which is a different statement.
  2. **Multi-unit deal** (multiplier > 1, "buy N for $X"): the deal
     price gets the original special price, the per-unit price is
     replaced by the regular retail price, the method is
     ``MULTI_UNIT`` and the quantity is the multiplier text as given.
  3. **Flat discount** (multiplier absent or <= 1): the per-unit price
     is kept, the method is ``FLAT``, quantity and deal price are empty.

Cost and dates are copied (dates normalized) regardless of gating.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pricefile_ingest.transforms.columns import first_value, text
from pricefile_ingest.transforms.dates import COMPACT_DATE, DateFormat, normalize_date
from pricefile_ingest.transforms.numbers import parse_numeric_loose

MULTI_UNIT = "2"
FLAT = "0"


@dataclass(frozen=True)
class SpecialPricingGroup:
    """Input aliases and output column names for one promotion window.

    Each ``*_aliases`` tuple lists accepted input spellings in priority
    order (e.g., ``("TPR_RETAIL", "TRP_RETAIL")``).
    """
    method_column: str
    price_column: str
    quantity_column: str
    deal_price_column: str
    start_date_column: str
    end_date_column: str
    cost_column: str
    price_aliases: tuple[str, ...]
    cost_aliases: tuple[str, ...]
    start_date_aliases: tuple[str, ...]
    end_date_aliases: tuple[str, ...]
    multiplier_aliases: tuple[str, ...]

    @property
    def output_columns(self) -> list[str]:
        """The group's output columns in file order."""
        return [
            self.method_column,
            self.price_column,
            self.quantity_column,
            self.deal_price_column,
            self.start_date_column,
            self.end_date_column,
            self.cost_column,
        ]


def has_pricing_data(row: Mapping[str, Any], group: SpecialPricingGroup) -> bool:
    """True if any raw field of *group* carries data (see module rule 1)."""
    if (
        first_value(row, *group.price_aliases)
        or first_value(row, *group.cost_aliases)
        or first_value(row, *group.start_date_aliases)
        or first_value(row, *group.end_date_aliases)
    ):
        return True
    multiplier = parse_numeric_loose(first_value(row, *group.multiplier_aliases))
    return multiplier is not None and multiplier > 0


def apply_special_pricing(
    row: Mapping[str, Any],
    group: SpecialPricingGroup,
    regular_price: Any,
    warnings: list[str],
    date_format: DateFormat = COMPACT_DATE,
) -> dict[str, str]:
    """Derive the output fields of one special-pricing group.

    Args:
        row: The raw input row.
        group: Column layout of the promotion window.
        regular_price: The row's regular retail price (raw text), used
            as the per-unit price of multi-unit deals.
        warnings: Date warnings are appended here.
        date_format: Output layout for the start/end dates.

    Returns:
        Dict with every column of ``group.output_columns``.
    """
    special_price = first_value(row, *group.price_aliases)
    multiplier_text = first_value(row, *group.multiplier_aliases)
    multiplier = parse_numeric_loose(multiplier_text)

    fields: dict[str, str] = {
        group.method_column: "",
        group.price_column: "",
        group.quantity_column: "",
        group.deal_price_column: "",
    }

    if has_pricing_data(row, group):
        if multiplier is not None and multiplier > 1:
            fields[group.deal_price_column] = text(special_price)
            fields[group.price_column] = text(regular_price)
            fields[group.method_column] = MULTI_UNIT
            fields[group.quantity_column] = text(multiplier_text)
        else:
            fields[group.price_column] = text(special_price)
            fields[group.method_column] = FLAT

    start = normalize_date(first_value(row, *group.start_date_aliases), date_format)
    end = normalize_date(first_value(row, *group.end_date_aliases), date_format)
    fields[group.start_date_column] = start.add_warning_to(warnings)
    fields[group.end_date_column] = end.add_warning_to(warnings)
    fields[group.cost_column] = text(first_value(row, *group.cost_aliases))

    return {column: fields[column] for column in group.output_columns}
