"""
Unit tests for the vendor registry (pricefile_ingest.vendor_registry).

Tests transformer lookup, default-vendor resolution, registration of
extra vendors, and the YAML metadata layer.
"""

from __future__ import annotations

import pytest
import yaml

from pricefile_ingest import vendor_registry
from pricefile_ingest.exceptions import ContractViolationError, UnknownVendorError
from pricefile_ingest.transformers.agne import AgneTransformer
from pricefile_ingest.transformers.base import RowResult, VendorTransformer
from pricefile_ingest.transformers.pine_state import PineStateSpiritsTransformer
from pricefile_ingest.vendor_registry import (
    DEFAULT_VENDOR_ID,
    available_vendor_ids,
    describe_vendor,
    get_output_columns,
    get_transformer,
    get_vendor_config,
    is_vendor_supported,
    list_vendors,
    load_all_vendor_configs,
    register_transformer,
    resolve_vendor_id,
)


@pytest.fixture
def scratch_vendor():
    """Register a throwaway vendor and remove it afterwards."""

    class ScratchTransformer(VendorTransformer):
        vendor_id = "SCRATCH"

        def transform_row(self, row, deposit_mapping=None, original_data=None):
            return RowResult(output_row={"A": str(row.get("A", ""))}, warnings=[])

        def get_output_columns(self):
            return ["A"]

    register_transformer(ScratchTransformer)
    yield ScratchTransformer
    vendor_registry._REGISTRY.pop("SCRATCH", None)


# ---------------------------------------------------------------------------
# Transformer lookup
# ---------------------------------------------------------------------------

class TestGetTransformer:
    """Tests for get_transformer() and friends."""

    def test_builtin_vendors(self):
        assert isinstance(get_transformer("AGNE"), AgneTransformer)
        assert isinstance(get_transformer("PINE_STATE_SPIRITS"), PineStateSpiritsTransformer)

    def test_available_ids(self):
        ids = available_vendor_ids()
        assert "AGNE" in ids
        assert "PINE_STATE_SPIRITS" in ids
        assert ids == sorted(ids)

    def test_unknown_vendor(self):
        with pytest.raises(UnknownVendorError, match='Vendor "NOPE" not found') as exc_info:
            get_transformer("NOPE")
        assert "AGNE" in str(exc_info.value)
        assert "PINE_STATE_SPIRITS" in exc_info.value.available
        assert exc_info.value.vendor_id == "NOPE"

    def test_explicit_id_never_falls_back(self):
        """An explicit but wrong id is an error, not the default vendor."""
        with pytest.raises(UnknownVendorError):
            get_transformer("agne")

    def test_is_vendor_supported(self):
        assert is_vendor_supported("AGNE")
        assert not is_vendor_supported("NOPE")

    def test_output_columns(self):
        assert get_output_columns("PINE_STATE_SPIRITS")[0] == "Item #"
        assert len(get_output_columns("AGNE")) == 27


class TestResolveVendorId:
    """Tests for resolve_vendor_id()."""

    def test_none_uses_default(self):
        assert resolve_vendor_id(None) == DEFAULT_VENDOR_ID == "AGNE"

    def test_blank_uses_default(self):
        assert resolve_vendor_id("  ") == "AGNE"

    def test_custom_default(self):
        assert resolve_vendor_id(None, default="PINE_STATE_SPIRITS") == "PINE_STATE_SPIRITS"

    def test_explicit_id_stripped_not_checked(self):
        assert resolve_vendor_id(" NOPE ") == "NOPE"


class TestRegisterTransformer:
    """Tests for register_transformer()."""

    def test_registered_vendor_is_usable(self, scratch_vendor):
        assert is_vendor_supported("SCRATCH")
        assert isinstance(get_transformer("SCRATCH"), scratch_vendor)

    def test_duplicate_id_rejected(self, scratch_vendor):
        class Other(scratch_vendor):
            pass

        with pytest.raises(ValueError, match="already registered"):
            register_transformer(Other)

    def test_reregistering_same_class_is_noop(self, scratch_vendor):
        assert register_transformer(scratch_vendor) is scratch_vendor

    def test_missing_vendor_id_rejected(self):
        class Nameless(VendorTransformer):
            def transform_row(self, row, deposit_mapping=None, original_data=None):
                return RowResult(output_row={})

            def get_output_columns(self):
                return []

        with pytest.raises(ValueError, match="vendor_id"):
            register_transformer(Nameless)


class TestCheckOutputRow:
    """Tests for VendorTransformer.check_output_row()."""

    def test_exact_columns_pass(self):
        transformer = get_transformer("PINE_STATE_SPIRITS")
        transformer.check_output_row(transformer.transform_row({}).output_row)

    def test_missing_column(self):
        transformer = get_transformer("PINE_STATE_SPIRITS")
        row = transformer.transform_row({}).output_row
        del row["UPC"]
        with pytest.raises(ContractViolationError, match="UPC"):
            transformer.check_output_row(row)

    def test_extra_column(self):
        transformer = get_transformer("PINE_STATE_SPIRITS")
        row = transformer.transform_row({}).output_row
        row["Proof"] = "80"
        with pytest.raises(ContractViolationError, match="Proof"):
            transformer.check_output_row(row)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TestVendorMetadata:
    """Tests for the YAML metadata layer."""

    def test_builtin_metadata_loads(self):
        configs = load_all_vendor_configs()
        assert configs["AGNE"].vendor_name == "AGNE"
        assert "xlsx" in configs["PINE_STATE_SPIRITS"].supported_formats

    def test_list_vendors_covers_registry(self):
        ids = [v.vendor_id for v in list_vendors()]
        assert ids == available_vendor_ids()

    def test_vendor_without_metadata_gets_placeholder(self, scratch_vendor):
        config = get_vendor_config("SCRATCH")
        assert config.vendor_name == "SCRATCH"
        assert config.description == "No description available"

    def test_get_vendor_config_unknown(self):
        with pytest.raises(UnknownVendorError):
            get_vendor_config("NOPE")

    def test_bad_yaml_skipped(self, tmp_path):
        (tmp_path / "good.yaml").write_text(
            yaml.dump({"vendor_id": "AGNE", "vendor_name": "Custom AGNE"}), encoding="utf-8"
        )
        (tmp_path / "bad.yaml").write_text("vendor_name: [unclosed", encoding="utf-8")
        configs = load_all_vendor_configs(tmp_path)
        assert list(configs) == ["AGNE"]
        assert configs["AGNE"].vendor_name == "Custom AGNE"

    def test_describe_vendor(self):
        info = describe_vendor("AGNE")
        assert info["vendor_id"] == "AGNE"
        assert info["output_columns"][0] == "Product Code"
        assert "FUTURE_*" in info["dropped_columns"]
        assert "Item: renamed to Product Code" in info["transformation_rules"]["transformations"]
