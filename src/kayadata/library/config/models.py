"""Pydantic models for data source configuration validation.

The four Kaya identity tables are read from CSV files named in a YAML
configuration file. The package bundles a configuration that points at its
own abridged data; users can swap in full upstream extracts by writing their
own file and passing it to :func:`load_data_config` or setting the
``KAYADATA_CONFIG`` environment variable.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from kayadata.library.error_messages import format_error
from kayadata.library.exceptions import ConfigurationError

CONFIG_ENV_VAR = "KAYADATA_CONFIG"

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
BUNDLED_CONFIG_PATH = BUNDLED_DATA_DIR / "data_sources.yaml"

TABLE_NAMES = ("kaya_data", "fuel_mix", "td_values", "td_trends")


def validate_path_exists(
    path: Path, base_dir: Path | None, dataset_name: str
) -> Path:
    """Resolve ``path`` against ``base_dir`` and check that it exists.

    Args:
        path: The configured path, absolute or relative
        base_dir: Directory that relative paths are resolved against
        dataset_name: Name of the table for the error message

    Returns
    -------
    The resolved path

    Raises
    ------
    ConfigurationError: If the path does not exist
    """
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path

    if not path.exists():
        raise ConfigurationError(
            format_error("missing_data_file", dataset_name=dataset_name, path=path)
        )
    return path


class TableSourceConfig(BaseModel):
    """Configuration for one backing table."""

    path: Path = Field(..., description="Path to the CSV file")
    description: str = Field("", description="What the table contains")
    source_url: str | None = Field(None, description="Upstream source of the data")


class DataSourcesConfig(BaseModel):
    """Configuration for the four Kaya identity tables."""

    base_dir: Path | None = Field(
        None, description="Directory that relative table paths are resolved against"
    )
    kaya_data: TableSourceConfig
    fuel_mix: TableSourceConfig
    td_values: TableSourceConfig
    td_trends: TableSourceConfig

    @field_validator("kaya_data", "fuel_mix", "td_values", "td_trends")
    @classmethod
    def validate_table_path(
        cls, v: TableSourceConfig, info: ValidationInfo
    ) -> TableSourceConfig:
        """Resolve the table path and check that the file exists."""
        base_dir = info.data.get("base_dir")
        resolved = validate_path_exists(v.path, base_dir, info.field_name)
        return v.model_copy(update={"path": resolved})

    def table_path(self, table: str) -> Path:
        """Return the resolved path of ``table``."""
        return getattr(self, table).path


def load_data_config(path: str | Path | None = None) -> DataSourcesConfig:
    """
    Load and validate a data sources configuration file.

    Parameters
    ----------
    path
        YAML file to read. If None, the ``KAYADATA_CONFIG`` environment
        variable is used if set, otherwise the bundled configuration.

    Returns
    -------
    DataSourcesConfig
        Validated configuration with resolved table paths

    Raises
    ------
    ConfigurationError
        If the file is missing, is not valid YAML, or does not describe
        all four tables
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or BUNDLED_CONFIG_PATH
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Data sources config not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Data sources config {path} must be a mapping of table names"
        )

    missing = [table for table in TABLE_NAMES if table not in raw]
    if missing:
        raise ConfigurationError(
            f"Data sources config {path} is missing tables: {', '.join(missing)}"
        )

    raw.setdefault("base_dir", path.resolve().parent)
    return DataSourcesConfig(**raw)
