"""Configuration models and utilities for the Kaya identity data sources."""

from kayadata.library.config.models import (
    BUNDLED_CONFIG_PATH,
    CONFIG_ENV_VAR,
    TABLE_NAMES,
    DataSourcesConfig,
    TableSourceConfig,
    load_data_config,
)
from kayadata.library.config.urls import DATA_SOURCE_URLS, world_bank_url

__all__ = [
    "BUNDLED_CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "DATA_SOURCE_URLS",
    "TABLE_NAMES",
    "DataSourcesConfig",
    "TableSourceConfig",
    "load_data_config",
    "world_bank_url",
]
