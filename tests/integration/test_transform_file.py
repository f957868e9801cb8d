"""
Integration tests: file in, file out via the public API.

Builds vendor input and reference files in tmp_path, runs
``transform_file()`` / ``run_config()`` and checks the written output.
"""

from __future__ import annotations

import pandas as pd
import pytest

import pricefile_ingest
from pricefile_ingest.config import OutputConfig, RunConfig, load_config, save_config
from pricefile_ingest.exceptions import UnknownVendorError
from tests.conftest import make_agne_row, make_pine_state_row, write_csv


def _read_output(path: str) -> pd.DataFrame:
    return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8-sig")


@pytest.mark.integration
class TestTransformFileAgne:
    """AGNE CSV with deposit and original data files."""

    def test_full_run(self, tmp_path, deposit_rows):
        input_path = write_csv(
            tmp_path / "agne.csv",
            [
                make_agne_row(),
                {key: "" for key in make_agne_row()},
                make_agne_row(Item="Chips", UPC="012345", BOTTLE_DEPOSIT="", SALE_MULTIPLE="2", SALE_RETAIL="1.99", REG_RETAIL="2.99"),
            ],
        )
        deposits = write_csv(tmp_path / "deposits.csv", deposit_rows)
        original = write_csv(tmp_path / "catalogue.csv", [{"Item": "Chips", "Department": "Snacks"}])

        summary = pricefile_ingest.transform_file(
            str(input_path),
            output_dir=str(tmp_path / "out"),
            deposit_mapping_path=str(deposits),
            original_data_path=str(original),
        )

        assert summary.vendor_id == "AGNE"
        assert summary.rows_processed == 2
        assert summary.rows_skipped == 1
        assert summary.warnings == [
            'Row 2: Department ID changed from "Snacks" to "Beverages" - using original value',
            "Row 2: No deposit mapping found for UPC/Item: 12345",
        ]

        df = _read_output(summary.output_path)
        assert list(df.columns) == pricefile_ingest.get_transformer("AGNE").get_output_columns()
        assert df["Product Code"].tolist() == ["10452", "Chips"]
        assert df["UPC"].tolist() == ["041220576104", "12345"]
        assert df["BOTTLE_DEPOSIT"].tolist() == ["DEP60", ""]
        assert df["Department"].tolist() == ["Beverages", "Snacks"]
        assert df.loc[1, "group_price"] == "1.99"
        assert df.loc[1, "SALE_RETAIL"] == "2.99"
        assert df.loc[1, "SPECIAL PRICING #1"] == "2"

    def test_output_file_name(self, tmp_path):
        input_path = write_csv(tmp_path / "agne.csv", [make_agne_row()])
        summary = pricefile_ingest.transform_file(str(input_path), output_dir=str(tmp_path / "out"))
        name = summary.output_path.replace("\\", "/").rsplit("/", 1)[-1]
        assert name.startswith("export_")
        assert name.endswith(".csv")


@pytest.mark.integration
class TestTransformFilePineState:
    """Pine State Excel input to Parquet output."""

    def test_excel_to_parquet(self, tmp_path):
        input_path = tmp_path / "specials.xlsx"
        pd.DataFrame([make_pine_state_row(), make_pine_state_row(**{"Item #": "2001", "UPC": "N/A"})]).to_excel(
            input_path, index=False
        )

        summary = pricefile_ingest.transform_file(
            str(input_path),
            output_dir=str(tmp_path / "out"),
            vendor_id="PINE_STATE_SPIRITS",
            output_format="parquet",
        )

        assert summary.output_path.endswith(".parquet")
        assert summary.warnings == ['Row 2: Could not normalize UPC for item: 002001 (original: "N/A")']
        df = pd.read_parquet(summary.output_path)
        assert df["Item #"].tolist() == ["000165", "002001"]
        assert df.loc[0, "Effective Start"] == "01-12-2025"
        assert df.loc[0, "Retail"] == "24.99"


@pytest.mark.integration
class TestRunConfig:
    """YAML-driven runs."""

    def test_saved_config_runs(self, tmp_path):
        input_path = write_csv(tmp_path / "specials.csv", [make_pine_state_row()])
        config_path = tmp_path / "run.yaml"
        save_config(
            RunConfig(
                input_path=str(input_path),
                vendor_id="PINE_STATE_SPIRITS",
                output=OutputConfig(output_dir=str(tmp_path / "out"), filename_prefix="pine"),
            ),
            config_path,
        )

        summary = pricefile_ingest.run_config(load_config(config_path))
        assert summary.rows_processed == 1
        assert "pine_" in summary.output_path
        assert _read_output(summary.output_path).loc[0, "UPC"] == "0835229000108"

    def test_unknown_vendor_writes_nothing(self, tmp_path):
        input_path = write_csv(tmp_path / "in.csv", [make_agne_row()])
        with pytest.raises(UnknownVendorError):
            pricefile_ingest.transform_file(
                str(input_path), output_dir=str(tmp_path / "out"), vendor_id="NOPE"
            )
        assert not (tmp_path / "out").exists()
