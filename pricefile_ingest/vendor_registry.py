"""
Vendor registry for pricefile-ingest.

Maps vendor ids to their ``VendorTransformer`` classes and loads the
descriptive vendor metadata from ``pricefile_ingest/vendors/*.yaml``
into Pydantic models. Each metadata file defines:
- vendor_id: unique identifier (e.g., "AGNE")
- vendor_name: display name
- description: one-line summary
- supported_formats: input file extensions the vendor ships
- transformation_rules: free-text lists of removed/kept columns and
  transformations, for display only

Metadata is documentation. The transformers never read it, and a vendor
without a metadata file is still fully usable.

New vendors are added by subclassing ``VendorTransformer`` and
decorating the class with ``@register_transformer``; a YAML file can be
dropped next to the built-in ones for a nicer listing.

The default vendor id is applied only by ``resolve_vendor_id()``, which
the run-level entry points call. Lookups by an explicit id never fall
back to it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, Field

from pricefile_ingest.exceptions import UnknownVendorError
from pricefile_ingest.transformers.base import VendorTransformer

logger = logging.getLogger(__name__)

# Directory containing vendor metadata YAML files (sibling package)
_VENDORS_DIR = Path(__file__).parent / "vendors"

DEFAULT_VENDOR_ID = "AGNE"

_T = TypeVar("_T", bound=type[VendorTransformer])

_REGISTRY: dict[str, type[VendorTransformer]] = {}
_builtins_loaded = False


class TransformationRules(BaseModel):
    """Human-readable rule summaries shown to users."""
    columns_removed: list[str] = Field(default_factory=list)
    columns_kept: list[str] = Field(default_factory=list)
    transformations: list[str] = Field(default_factory=list)


class VendorConfig(BaseModel):
    """Vendor metadata loaded from YAML."""
    vendor_id: str
    vendor_name: str
    description: str = ""
    supported_formats: list[str] = Field(default_factory=lambda: ["csv"])
    transformation_rules: TransformationRules = Field(default_factory=TransformationRules)


# ---------------------------------------------------------------------------
# Transformer registration
# ---------------------------------------------------------------------------

def register_transformer(cls: _T) -> _T:
    """Class decorator adding a ``VendorTransformer`` subclass to the registry.

    Raises:
        ValueError: If the class has no ``vendor_id`` or the id is
            already taken by a different class.
    """
    vendor_id = cls.vendor_id
    if not vendor_id:
        raise ValueError(f"{cls.__name__} must define a non-empty vendor_id")
    existing = _REGISTRY.get(vendor_id)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Vendor id '{vendor_id}' is already registered to {existing.__name__}"
        )
    _REGISTRY[vendor_id] = cls
    logger.debug("Registered transformer %s for vendor %s", cls.__name__, vendor_id)
    return cls


def _get_registry() -> dict[str, type[VendorTransformer]]:
    """Register the built-in transformers on first use."""
    global _builtins_loaded
    if not _builtins_loaded:
        from pricefile_ingest.transformers.agne import AgneTransformer
        from pricefile_ingest.transformers.pine_state import PineStateSpiritsTransformer

        register_transformer(AgneTransformer)
        register_transformer(PineStateSpiritsTransformer)
        _builtins_loaded = True
    return _REGISTRY


def available_vendor_ids() -> list[str]:
    """Sorted ids of every registered vendor."""
    return sorted(_get_registry())


def is_vendor_supported(vendor_id: str) -> bool:
    return vendor_id in _get_registry()


def resolve_vendor_id(vendor_id: str | None, default: str = DEFAULT_VENDOR_ID) -> str:
    """Apply the default vendor when none was specified.

    ``None`` and blank strings mean "not specified" and resolve to
    *default*. Any other value is returned stripped, unchecked.
    """
    if vendor_id is None or not vendor_id.strip():
        logger.info("No vendor specified, using default vendor %s", default)
        return default
    return vendor_id.strip()


def get_transformer(vendor_id: str) -> VendorTransformer:
    """Instantiate the transformer registered for *vendor_id*.

    Raises:
        UnknownVendorError: If *vendor_id* is not registered.
    """
    registry = _get_registry()
    cls = registry.get(vendor_id)
    if cls is None:
        raise UnknownVendorError(vendor_id, list(registry))
    return cls()


def get_output_columns(vendor_id: str) -> list[str]:
    """Ordered output columns of *vendor_id*'s transformer."""
    return get_transformer(vendor_id).get_output_columns()


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

def load_vendor_config(path: Path) -> VendorConfig:
    """Load a single vendor metadata YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return VendorConfig.model_validate(raw)


def load_all_vendor_configs(vendors_dir: Path | None = None) -> dict[str, VendorConfig]:
    """Load every vendor metadata YAML file in *vendors_dir*.

    Files that fail to parse are logged and skipped.

    Args:
        vendors_dir: Directory to scan for .yaml files. Defaults to
            the built-in vendors/ directory.

    Returns:
        Dict mapping vendor_id -> VendorConfig.
    """
    vendors_dir = vendors_dir or _VENDORS_DIR
    configs: dict[str, VendorConfig] = {}
    for yaml_path in sorted(vendors_dir.glob("*.yaml")):
        try:
            config = load_vendor_config(yaml_path)
        except Exception as e:
            logger.warning("Failed to load vendor metadata from %s: %s", yaml_path, e)
            continue
        configs[config.vendor_id] = config
        logger.debug("Loaded vendor metadata: %s from %s", config.vendor_id, yaml_path)
    return configs


def get_vendor_config(
    vendor_id: str, vendors_dir: Path | None = None
) -> VendorConfig:
    """Metadata for a registered vendor.

    A registered vendor without a metadata file gets a minimal config
    named after its id.

    Raises:
        UnknownVendorError: If *vendor_id* is not registered.
    """
    registry = _get_registry()
    if vendor_id not in registry:
        raise UnknownVendorError(vendor_id, list(registry))
    configs = load_all_vendor_configs(vendors_dir)
    return configs.get(vendor_id) or _placeholder_config(vendor_id)


def list_vendors(vendors_dir: Path | None = None) -> list[VendorConfig]:
    """Metadata for every registered vendor, sorted by id."""
    configs = load_all_vendor_configs(vendors_dir)
    return [
        configs.get(vendor_id) or _placeholder_config(vendor_id)
        for vendor_id in available_vendor_ids()
    ]


def describe_vendor(vendor_id: str, vendors_dir: Path | None = None) -> dict[str, Any]:
    """Metadata plus the transformer's actual output and dropped columns."""
    transformer = get_transformer(vendor_id)
    config = get_vendor_config(vendor_id, vendors_dir)
    info = config.model_dump()
    info["output_columns"] = transformer.get_output_columns()
    info["dropped_columns"] = list(transformer.dropped_columns)
    return info


def _placeholder_config(vendor_id: str) -> VendorConfig:
    return VendorConfig(
        vendor_id=vendor_id,
        vendor_name=vendor_id,
        description="No description available",
    )
