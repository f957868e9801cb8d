"""
Reference data builders for pricefile-ingest.

Two optional side inputs feed the transformers:

- **Deposit mapping**: deposit key -> fee identifier used for the
  ``BOTTLE_DEPOSIT`` column. Two file layouts are accepted, even mixed
  in one file:

  * amount format (``Id``, ``Name``, ``Amount``): the amount, both
    normalized (``.05`` -> ``0.05``) and exactly as written, maps to
    ``Id``;
  * legacy format (``UPC``, ``Item``, ``DepositID``): the row's UPC and
    Item each map to the deposit id.

- **Original data**: item number -> ``{"Department": ...}`` from the
  store's existing catalogue, so a vendor file cannot silently move an
  item to another department.

Both are built once per run and returned read-only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pricefile_ingest.reader import read_rows
from pricefile_ingest.transformers.base import DepositMapping, OriginalData
from pricefile_ingest.transforms.columns import first_value, text
from pricefile_ingest.transforms.numbers import numeric_key, parse_numeric_loose

logger = logging.getLogger(__name__)

_DEPOSIT_ID_ALIASES = ("DepositID", "DepositPrice")


def build_deposit_mapping(rows: Iterable[Mapping[str, Any]]) -> DepositMapping:
    """Build the deposit key -> fee id mapping from reference rows.

    Later rows overwrite earlier ones on key collisions.
    """
    mapping: dict[str, str] = {}
    for row in rows:
        deposit_id = text(first_value(row, "Id")).strip()
        amount = text(first_value(row, "Amount")).strip()
        if deposit_id and amount:
            number = parse_numeric_loose(amount)
            if number is not None:
                mapping[numeric_key(number)] = deposit_id
            mapping[amount] = deposit_id

        legacy_id = text(first_value(row, *_DEPOSIT_ID_ALIASES)).strip()
        if legacy_id:
            upc = text(first_value(row, "UPC")).strip()
            item = text(first_value(row, "Item")).strip()
            if upc:
                mapping[upc] = legacy_id
            if item:
                mapping[item] = legacy_id

    return MappingProxyType(mapping)


def load_deposit_mapping(path: str | Path) -> DepositMapping:
    """Read a deposit mapping file (CSV/Excel) and build the mapping.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParsingError: If the file cannot be read.
    """
    mapping = build_deposit_mapping(read_rows(path))
    logger.info("Loaded %d deposit mapping keys from %s", len(mapping), Path(path).name)
    return mapping


def build_original_data(rows: Iterable[Mapping[str, Any]]) -> OriginalData:
    """Map item number -> original attributes (currently ``Department``)."""
    data: dict[str, Mapping[str, str]] = {}
    for row in rows:
        item = text(first_value(row, "Item", "Product Code")).strip()
        if not item:
            continue
        data[item] = MappingProxyType(
            {"Department": text(first_value(row, "Department")).strip()}
        )
    return MappingProxyType(data)


def load_original_data(path: str | Path) -> OriginalData:
    """Read an original item data file (CSV/Excel).

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParsingError: If the file cannot be read.
    """
    data = build_original_data(read_rows(path))
    logger.info("Loaded original data for %d items from %s", len(data), Path(path).name)
    return data
