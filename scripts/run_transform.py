"""
Demo script: transform one vendor price file via the public API.

Usage:
    uv run python scripts/run_transform.py inputs/agne_weekly.csv
    uv run python scripts/run_transform.py inputs/specials.xlsx --vendor PINE_STATE_SPIRITS
    uv run python scripts/run_transform.py inputs/agne_weekly.csv \\
        --deposits inputs/deposits.csv --original inputs/catalogue.csv
    uv run python scripts/run_transform.py --list-vendors

Without --vendor the default vendor (AGNE) is used. Row warnings are
logged after the run; they never stop it.
"""

from __future__ import annotations

import argparse
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_transform")

MAX_WARNINGS_SHOWN = 50


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Transform a vendor price file.")
    parser.add_argument("input", nargs="?", help="Vendor CSV/Excel file")
    parser.add_argument("--vendor", default=None, help="Vendor id (default: AGNE)")
    parser.add_argument("--deposits", default=None, help="Deposit mapping file")
    parser.add_argument("--original", default=None, help="Original item data file")
    parser.add_argument("--output-dir", default="outputs/", help="Output directory")
    parser.add_argument(
        "--format", choices=["csv", "parquet"], default="csv", help="Output format"
    )
    parser.add_argument(
        "--list-vendors", action="store_true", help="List supported vendors and exit"
    )
    return parser


def _list_vendors() -> None:
    from pricefile_ingest.vendor_registry import describe_vendor, list_vendors

    for vendor in list_vendors():
        info = describe_vendor(vendor.vendor_id)
        log.info("=" * 70)
        log.info("%s  (%s)", vendor.vendor_id, vendor.vendor_name)
        log.info("  %s", vendor.description)
        log.info("  formats : %s", ", ".join(vendor.supported_formats))
        log.info("  columns : %d output columns", len(info["output_columns"]))
        for rule in vendor.transformation_rules.transformations:
            log.info("  - %s", rule)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import pricefile_ingest
    from pricefile_ingest.exceptions import PricefileIngestError

    args = _build_parser().parse_args()

    if args.list_vendors:
        _list_vendors()
        return 0
    if not args.input:
        log.error("No input file given (see --help)")
        return 2

    try:
        summary = pricefile_ingest.transform_file(
            args.input,
            output_dir=args.output_dir,
            vendor_id=args.vendor,
            deposit_mapping_path=args.deposits,
            original_data_path=args.original,
            output_format=args.format,
        )
    except (PricefileIngestError, FileNotFoundError) as exc:
        log.error("%s", exc)
        return 1

    log.info("=" * 70)
    log.info("Vendor      : %s", summary.vendor_id)
    log.info("Rows        : %d processed, %d skipped", summary.rows_processed, summary.rows_skipped)
    log.info("Output      : %s", summary.output_path)
    log.info("Warnings    : %d", len(summary.warnings))
    for warning in summary.warnings[:MAX_WARNINGS_SHOWN]:
        log.warning("  %s", warning)
    if len(summary.warnings) > MAX_WARNINGS_SHOWN:
        log.warning("  ... %d more", len(summary.warnings) - MAX_WARNINGS_SHOWN)
    return 0


if __name__ == "__main__":
    sys.exit(main())
