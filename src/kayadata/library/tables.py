"""
The immutable bundle of backing tables that every query reads from.

The four tables are loaded once and then passed explicitly to the query
functions through their ``tables=`` argument. Queries that are not given a
bundle use :func:`get_default_tables`, which loads the tables named by the
data sources configuration on first use and returns the same bundle after
that.
"""

from __future__ import annotations

import functools
import logging

import pandas as pd
from attrs import define, field

from kayadata.library.config import DataSourcesConfig, load_data_config
from kayadata.library.preprocessing import (
    load_fuel_mix,
    load_kaya_data,
    load_td_trends,
    load_td_values,
    prepare_fuel_mix,
    prepare_kaya_data,
    prepare_td_trends,
    prepare_td_values,
)
from kayadata.library.validation import validate_required_columns, validate_table_name

logger = logging.getLogger(__name__)


@define(frozen=True, eq=False)
class KayaTables:
    """Read-only container for the four Kaya identity tables.

    Query functions never modify these frames; they filter them into new
    frames. Callers holding a bundle should treat the frames the same way.

    Attributes
    ----------
    kaya_data
        Historical series, one row per region and year
    fuel_mix
        Fuel mix, one row per region, year and fuel
    td_values
        Top-down projected values, one row per region and projection year
    td_trends
        Top-down trends, one row per region
    """

    kaya_data: pd.DataFrame = field(repr=lambda df: f"<{len(df)} rows>")
    fuel_mix: pd.DataFrame = field(repr=lambda df: f"<{len(df)} rows>")
    td_values: pd.DataFrame = field(repr=lambda df: f"<{len(df)} rows>")
    td_trends: pd.DataFrame = field(repr=lambda df: f"<{len(df)} rows>")

    def __attrs_post_init__(self):
        """Validate that every table has the columns the queries rely on."""
        for name in ("kaya_data", "fuel_mix", "td_values", "td_trends"):
            validate_required_columns(self.table(name), name)

    def table(self, name: str) -> pd.DataFrame:
        """Return the table called ``name``."""
        return getattr(self, validate_table_name(name))

    @classmethod
    def from_frames(
        cls,
        kaya_data: pd.DataFrame,
        fuel_mix: pd.DataFrame,
        td_values: pd.DataFrame,
        td_trends: pd.DataFrame,
    ) -> KayaTables:
        """Build a bundle from raw in-memory frames, normalising their dtypes."""
        return cls(
            kaya_data=prepare_kaya_data(kaya_data),
            fuel_mix=prepare_fuel_mix(fuel_mix),
            td_values=prepare_td_values(td_values),
            td_trends=prepare_td_trends(td_trends),
        )


def load_tables(config: DataSourcesConfig | None = None) -> KayaTables:
    """
    Load the four tables named by a data sources configuration.

    Parameters
    ----------
    config
        Configuration to use. If None, :func:`load_data_config` is called
        with no arguments.

    Returns
    -------
    KayaTables
        Freshly loaded tables

    Raises
    ------
    ConfigurationError
        If the configuration cannot be loaded
    DataLoadingError
        If a table file cannot be read
    DataProcessingError
        If a table lacks required columns or holds unknown labels
    """
    if config is None:
        config = load_data_config()

    tables = KayaTables(
        kaya_data=load_kaya_data(config.table_path("kaya_data")),
        fuel_mix=load_fuel_mix(config.table_path("fuel_mix")),
        td_values=load_td_values(config.table_path("td_values")),
        td_trends=load_td_trends(config.table_path("td_trends")),
    )
    logger.info("Kaya tables loaded: %s", tables)
    return tables


@functools.cache
def get_default_tables() -> KayaTables:
    """
    Get the process-wide default tables.

    The tables are loaded on the first call and cached afterwards. Call
    ``get_default_tables.cache_clear()`` to reload them, e.g. after changing
    ``KAYADATA_CONFIG``.
    """
    return load_tables()


def resolve_tables(tables: KayaTables | None) -> KayaTables:
    """Return ``tables``, or the default tables if it is None."""
    return get_default_tables() if tables is None else tables
