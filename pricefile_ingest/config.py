"""
Run configuration models and YAML I/O for pricefile-ingest.

This module defines the Pydantic models that map 1:1 to a run config
YAML file, plus helpers for loading and saving it.

Key models:
- RunConfig: Top-level config (input file, vendor, reference files, output).
- OutputConfig: Output directory, format and file name prefix.

Key functions:
- load_config(path) -> RunConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

A config file is optional: ``transform_file()`` builds a ``RunConfig``
from keyword arguments. Saving one makes a run repeatable, e.g.::

    input_path: inputs/agne_weekly.csv
    vendor_id: AGNE
    deposit_mapping_path: inputs/deposits.csv
    original_data_path: null
    output:
      output_dir: outputs/
      output_format: csv
      filename_prefix: export
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from pricefile_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "csv", description="Output format"
    )
    filename_prefix: str = Field(
        "export", description="Output files are named {prefix}_{timestamp}.{format}"
    )


class RunConfig(BaseModel):
    """Top-level configuration for one transformation run."""

    input_path: str = Field(..., description="Path to the vendor price file")
    vendor_id: str | None = Field(
        None, description="Vendor id; None selects the default vendor"
    )
    deposit_mapping_path: str | None = Field(
        None, description="Optional deposit mapping file (CSV/Excel)"
    )
    original_data_path: str | None = Field(
        None, description="Optional original item data file (CSV/Excel)"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("vendor_id")
    @classmethod
    def _blank_vendor_is_unspecified(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


def load_config(path: str | Path) -> RunConfig:
    """Load and validate a run config YAML into a RunConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return RunConfig.model_validate(raw)


def save_config(config: RunConfig, path: str | Path) -> None:
    """Serialize a RunConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# pricefile-ingest run configuration\n")
        f.write("# vendor_id: null uses the default vendor\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
