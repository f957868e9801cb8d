"""
Shared test fixtures and sample rows for pricefile-ingest tests.

Sample rows are defined here as module-level builders so each test can
take a fresh copy and override single cells. File-based tests write
their inputs into pytest's ``tmp_path``; no checked-in data files are
needed.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Sample rows -- one realistic row per vendor
# ---------------------------------------------------------------------------

def make_agne_row(**overrides: str) -> dict[str, str]:
    """A full AGNE input row with an active sale and no TPR."""
    row = {
        "Status": "A",
        "Item": "10452",
        "UPC": "0041220576104",
        "CaseUPC": "10041220576101",
        "Description": "HEB COLA 12PK",
        "MANUFACTURER": "HEB",
        "Department": "Beverages",
        "REG_MULTIPLE": "1",
        "REG_RETAIL": "6.49",
        "CASE_RETAIL": "",
        "PACK": "2",
        "REGULARCOST": "9.80",
        "TAX1": "Y",
        "TAX2": "N",
        "TAX3": "N",
        "FOOD_STAMP": "1",
        "WIC": "",
        "BOTTLE_DEPOSIT": "0.60",
        "CASE_DEPOSIT": "1.20",
        "PRC_GRP": "",
        "SALE_MULTIPLE": "1",
        "SALE_RETAIL": "5.49",
        "SALE_START_DATE": "2025-12-1",
        "SALE_END_DATE": "12/28/2025",
        "SALE_COST": "8.90",
        "TPR_MULTIPLE": "",
        "TPR_RETAIL": "",
        "TPR_START_DATE": "",
        "TPR_END_DATE": "",
        "TPR_COST": "",
        "FUTURE_RETAIL": "6.79",
        "FUTURE_COST": "10.10",
        "BRAND": "HEB",
        "PBHN": "",
        "CLASS": "SODA",
        "ITEM_SIZE": "12",
        "ITEM_UOM": "OZ",
    }
    row.update(overrides)
    return row


def make_pine_state_row(**overrides: str) -> dict[str, str]:
    """A Pine State Spirits monthly specials row."""
    row = {
        "Item #": "165",
        "Description": "ABSOLUT VODKA",
        "Size": "750",
        "Unit": "ML",
        "UPC": "835229000108",
        "Proof": "80",
        "Effective Start": "1-12-2025",
        "Effective End": "31-12-2025",
        "Retail": "$24.99",
        "Sale Price": "21.99",
        "Retail Savings": "3.00",
        "Agency Cost": "19.9",
        "Agency Sale Cost": "17.4",
        "Agency Savings": "2.50",
    }
    row.update(overrides)
    return row


def write_csv(path: Path, rows: list[dict[str, str]]) -> Path:
    """Write *rows* as a UTF-8 CSV with a header taken from the first row."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)
    return path


@pytest.fixture
def agne_row() -> dict[str, str]:
    return make_agne_row()


@pytest.fixture
def pine_state_row() -> dict[str, str]:
    return make_pine_state_row()


@pytest.fixture
def deposit_rows() -> list[dict[str, str]]:
    """Deposit mapping reference rows in the amount format."""
    return [
        {"Id": "DEP5", "Name": "5 cent", "Amount": ".05"},
        {"Id": "DEP15", "Name": "15 cent", "Amount": "0.15"},
        {"Id": "DEP60", "Name": "12 x 5 cent", "Amount": "0.60"},
    ]


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (file in, file out)",
    )
