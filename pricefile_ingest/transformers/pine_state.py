"""
Pine State Spirits monthly specials transformer.

Input: the monthly specials sheet (Item #, Description, Size, Unit, UPC,
Proof, Effective Start/End, Retail, Sale Price, Retail Savings, Agency
Cost, Agency Sale Cost, Agency Savings). Header spellings vary between
months, so most fields accept several aliases.

Output (12 columns), mapping rules:
  - Item #: numeric codes zero-padded to 6 digits, others verbatim.
  - UPC: restored to 13 digits by left-padding with zeros (spreadsheet
    exports drop leading zeros and sometimes use scientific notation).
  - Effective Start/End: emitted as ``DD-MM-YYYY``. The usual layouts
    are tried first, then ``D/M/YYYY`` and ``M/D/YY`` for dates that fail
    the range check (``31/12/2025``, ``12/31/25``).
  - Retail, Sale Price, Agency Cost, Agency Sale Cost: two decimals.
  - Special Pricing Method: always ``"0"``; this sheet has no multi-unit
    deals, so there is no has-data gating.
  - Proof, Retail Savings and Agency Savings are dropped.

Deposit mapping and original item data are accepted for interface
compatibility but not used.
"""

from __future__ import annotations

from pricefile_ingest.transformers.base import (
    DepositMapping,
    OriginalData,
    RawRow,
    RowResult,
    VendorTransformer,
)
from pricefile_ingest.transforms.codes import pad_item_number, pad_upc
from pricefile_ingest.transforms.columns import first_value, text
from pricefile_ingest.transforms.dates import (
    D_M_YY_DASH,
    D_M_YY_SLASH,
    D_M_YYYY_DASH,
    D_M_YYYY_SLASH,
    M_D_YY_SLASH,
    M_D_YYYY,
    YYYY_M_D,
    YYYYMMDD,
    DateFormat,
    normalize_date,
)
from pricefile_ingest.transforms.numbers import format_price
from pricefile_ingest.transforms.pricing import FLAT

UPC_WIDTH = 13
ITEM_NUMBER_WIDTH = 6

DAY_FIRST_DATE = DateFormat(
    output="%d-%m-%Y",
    patterns=(
        YYYYMMDD,
        YYYY_M_D,
        M_D_YYYY,
        D_M_YYYY_DASH,
        D_M_YY_SLASH,
        D_M_YY_DASH,
        # fallbacks for dates the layouts above read out of range
        D_M_YYYY_SLASH,
        M_D_YY_SLASH,
    ),
    retry_on_invalid=True,
    strip_quotes=True,
)

_ITEM_ALIASES = ("Item #", "Item", "ItemNumber", "Item No", "ItemNo")
_UPC_ALIASES = ("UPC", "UPC Code", "UPC#", "Code", "Barcode", "Bar Code", "EAN", "GTIN")

# output column -> (input aliases, label used in warnings)
_PRICE_FIELDS: dict[str, tuple[tuple[str, ...], str]] = {
    "Retail": (("Retail", "Retail Price"), "retail price"),
    "Sale Price": (("Sale Price", "SalePrice", "Special Price"), "sale price"),
    "Agency Cost": (("Agency Cost", "AgencyCost", "Cost"), "agency cost"),
    "Agency Sale Cost": (("Agency Sale Cost", "AgencySaleCost", "Sale Cost"), "agency sale cost"),
}

_OUTPUT_COLUMNS = [
    "Item #",
    "Description",
    "Size",
    "Unit",
    "UPC",
    "Effective Start",
    "Effective End",
    "Retail",
    "Special Pricing Method",
    "Sale Price",
    "Agency Cost",
    "Agency Sale Cost",
]


class PineStateSpiritsTransformer(VendorTransformer):
    """Transformer for Pine State Spirits monthly specials."""

    vendor_id = "PINE_STATE_SPIRITS"
    dropped_columns = ("Proof", "Retail Savings", "Agency Savings")
    date_format = DAY_FIRST_DATE
    pricing_method = FLAT

    def transform_row(
        self,
        row: RawRow,
        deposit_mapping: DepositMapping | None = None,
        original_data: OriginalData | None = None,
    ) -> RowResult:
        warnings: list[str] = []
        out: dict[str, str] = {}

        item = pad_item_number(first_value(row, *_ITEM_ALIASES), ITEM_NUMBER_WIDTH)
        out["Item #"] = item
        out["Description"] = text(first_value(row, "Description", "Desc"))
        out["Size"] = text(first_value(row, "Size"))
        out["Unit"] = text(first_value(row, "Unit", "UOM"))

        raw_upc = first_value(row, *_UPC_ALIASES)
        out["UPC"] = pad_upc(raw_upc, UPC_WIDTH)
        if text(raw_upc).strip() and not out["UPC"]:
            warnings.append(
                f'Could not normalize UPC for item: {item} (original: "{raw_upc}")'
            )

        out["Effective Start"] = normalize_date(
            first_value(row, "Effective Start", "EffectiveStart", "Start Date"),
            self.date_format,
        ).add_warning_to(warnings)
        out["Effective End"] = normalize_date(
            first_value(row, "Effective End", "EffectiveEnd", "End Date"),
            self.date_format,
        ).add_warning_to(warnings)

        out["Special Pricing Method"] = self.pricing_method

        for column, (aliases, label) in _PRICE_FIELDS.items():
            raw = first_value(row, *aliases)
            out[column] = format_price(raw)
            if raw is not None and not out[column]:
                warnings.append(f"Invalid {label} for item: {item}")

        return RowResult(
            output_row={column: out[column] for column in _OUTPUT_COLUMNS},
            warnings=warnings,
        )

    def get_output_columns(self) -> list[str]:
        return list(_OUTPUT_COLUMNS)
