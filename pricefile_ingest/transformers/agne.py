"""
AGNE vendor transformer.

Input: the AGNE retail item sheet (~37 columns: item/UPC identifiers,
regular pricing, tax and benefit flags, a bottle deposit, and two
promotion windows, SALE_* and TPR_*).

Output (27 columns), mapping rules:
  - Item -> ``Product Code``; TAX1 -> ``Tax ID`` (Y -> 1, N -> empty).
  - UPC: exactly one leading zero removed.
  - Department: the store's original department wins over the file's
    (see ``preserve_department``), keyed by the raw Item value.
  - BOTTLE_DEPOSIT: resolved to a fee identifier via the deposit mapping.
  - SALE_* and TPR_* (TRP_* accepted as an alias): expanded into
    method / price / quantity / deal price / dates / cost with
    has-data gating (see ``transforms.pricing``).
  - All dates emitted as compact ``YYYYMMDD``.
  - Status, CaseUPC, MANUFACTURER, REG_MULTIPLE, CASE_RETAIL, TAX2,
    TAX3, CASE_DEPOSIT, PRC_GRP, FUTURE_*, BRAND, PBHN, CLASS and the
    multiplier columns are dropped.
"""

from __future__ import annotations

from pricefile_ingest.transformers.base import (
    DepositMapping,
    OriginalData,
    RawRow,
    RowResult,
    VendorTransformer,
)
from pricefile_ingest.transforms.codes import normalize_leading_zero_upc
from pricefile_ingest.transforms.columns import get_column_value, text
from pricefile_ingest.transforms.dates import COMPACT_DATE
from pricefile_ingest.transforms.deposit import lookup_deposit
from pricefile_ingest.transforms.flags import map_boolean_flag, preserve_department
from pricefile_ingest.transforms.pricing import SpecialPricingGroup, apply_special_pricing

SALE_GROUP = SpecialPricingGroup(
    method_column="SPECIAL PRICING #1",
    price_column="SALE_RETAIL",
    quantity_column="SPECIAL QUANTITY 1",
    deal_price_column="group_price",
    start_date_column="SALE_START_DATE",
    end_date_column="SALE_END_DATE",
    cost_column="SALE_COST",
    price_aliases=("SALE_RETAIL",),
    cost_aliases=("SALE_COST",),
    start_date_aliases=("SALE_START_DATE",),
    end_date_aliases=("SALE_END_DATE",),
    multiplier_aliases=("SALE_MULTIPLE",),
)

TPR_GROUP = SpecialPricingGroup(
    method_column="SPECIAL PRICING #2",
    price_column="TPR_RETAIL",
    quantity_column="SPECIAL QUANTITY 2",
    deal_price_column="group_price_2",
    start_date_column="TPR_START_DATE",
    end_date_column="TPR_END_DATE",
    cost_column="TPR_COST",
    price_aliases=("TPR_RETAIL", "TRP_RETAIL"),
    cost_aliases=("TPR_COST", "TRP_COST"),
    start_date_aliases=("TPR_START_DATE", "TRP_START_DATE"),
    end_date_aliases=("TPR_END_DATE", "TRP_END_DATE"),
    multiplier_aliases=("TPR_MULTIPLE", "TRP_MULTIPLE"),
)

# Output columns ahead of the two promotion groups
_ITEM_COLUMNS = [
    "Product Code",
    "UPC",
    "Description",
    "Department",
    "REG_RETAIL",
    "PACK",
    "REGULARCOST",
    "Tax ID",
    "FOOD_STAMP",
    "WIC",
    "BOTTLE_DEPOSIT",
]

_TRAILING_COLUMNS = ["ITEM_SIZE", "ITEM_UOM"]

# Input columns copied through under the same name
_PASSTHROUGH = (
    "Description",
    "REG_RETAIL",
    "PACK",
    "REGULARCOST",
    "FOOD_STAMP",
    "WIC",
    "ITEM_SIZE",
    "ITEM_UOM",
)


class AgneTransformer(VendorTransformer):
    """Transformer for the AGNE retail item sheet."""

    vendor_id = "AGNE"
    dropped_columns = (
        "Status",
        "CaseUPC",
        "MANUFACTURER",
        "REG_MULTIPLE",
        "CASE_RETAIL",
        "TAX2",
        "TAX3",
        "CASE_DEPOSIT",
        "PRC_GRP",
        "FUTURE_*",
        "BRAND",
        "PBHN",
        "CLASS",
        "SALE_MULTIPLE",
        "TPR_MULTIPLE",
        "TRP_MULTIPLE",
    )
    date_format = COMPACT_DATE

    def transform_row(
        self,
        row: RawRow,
        deposit_mapping: DepositMapping | None = None,
        original_data: OriginalData | None = None,
    ) -> RowResult:
        warnings: list[str] = []
        out: dict[str, str] = {}

        def get(name: str) -> str:
            return text(get_column_value(row, name))

        item = get("Item")
        out["Product Code"] = item
        out["UPC"] = text(normalize_leading_zero_upc(get_column_value(row, "UPC")))

        for name in _PASSTHROUGH:
            out[name] = get(name)

        original_dept = None
        if original_data and item in original_data:
            original_dept = original_data[item].get("Department")
        out["Department"] = preserve_department(
            get("Department"), original_dept
        ).add_warning_to(warnings)

        out["Tax ID"] = map_boolean_flag(
            get_column_value(row, "TAX1"), field="TAX1"
        ).add_warning_to(warnings)

        out["BOTTLE_DEPOSIT"] = lookup_deposit(
            get_column_value(row, "BOTTLE_DEPOSIT"),
            upc=out["UPC"],
            item=item,
            deposit_mapping=deposit_mapping,
        ).add_warning_to(warnings)

        regular_price = get("REG_RETAIL")
        for group in (SALE_GROUP, TPR_GROUP):
            out.update(
                apply_special_pricing(
                    row, group, regular_price, warnings, date_format=self.date_format
                )
            )

        return RowResult(
            output_row={column: out[column] for column in self.get_output_columns()},
            warnings=warnings,
        )

    def get_output_columns(self) -> list[str]:
        return [
            *_ITEM_COLUMNS,
            *SALE_GROUP.output_columns,
            *TPR_GROUP.output_columns,
            *_TRAILING_COLUMNS,
        ]
