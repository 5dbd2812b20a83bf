"""Data loading functions for the Kaya identity tables.

Each ``load_*`` function reads one CSV file and hands it to the matching
``prepare_*`` function, which checks the columns and normalises dtypes.
The ``prepare_*`` functions are also used for tables built in memory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from kayadata.library.error_messages import format_error
from kayadata.library.exceptions import DataLoadingError
from kayadata.library.utils.dataframes import (
    FUEL_CATEGORIES,
    GEOGRAPHIES,
    fuel_categorical,
)
from kayadata.library.validation import (
    validate_allowed_values,
    validate_required_columns,
)

logger = logging.getLogger(__name__)


def _read_table_csv(path: Path, dataset_name: str) -> pd.DataFrame:
    """Read a table CSV, keeping region codes such as "NA" as strings."""
    path = Path(path)
    if not path.exists():
        raise DataLoadingError(
            format_error("missing_data_file", dataset_name=dataset_name, path=path)
        )
    try:
        df = pd.read_csv(
            path,
            dtype={"region": str, "region_code": str, "geography": str},
            keep_default_na=False,
            na_values=[""],
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataLoadingError(f"Could not read {dataset_name} from {path}: {e}") from e

    logger.info("Loaded %s: %d rows from %s", dataset_name, len(df), path)
    return df


def _prepare_region_columns(df: pd.DataFrame, dataset_name: str) -> pd.DataFrame:
    validate_required_columns(df, dataset_name)
    validate_allowed_values(df, "geography", GEOGRAPHIES, dataset_name)
    df = df.copy()
    for col in ["region", "region_code", "geography"]:
        df[col] = df[col].astype(str)
    return df


def _prepare_numeric(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    for col in columns:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
    return df


def prepare_kaya_data(df: pd.DataFrame) -> pd.DataFrame:
    """Validate and normalise the historical Kaya table.

    Args:
        df: Raw table with the ``kaya_data`` columns

    Returns
    -------
        Copy of the table with integer years and float quantities
    """
    df = _prepare_region_columns(df, "kaya_data")
    df["year"] = df["year"].astype(int)
    return _prepare_numeric(
        df, ["P", "G", "E", "F", "g", "e", "f", "ef", "G_ppp", "G_mer"]
    )


def prepare_fuel_mix(df: pd.DataFrame) -> pd.DataFrame:
    """Validate and normalise the fuel mix table.

    Args:
        df: Raw table with the ``fuel_mix`` columns

    Returns
    -------
        Copy of the table with ``fuel`` as an ordered categorical over
        the fuel categories
    """
    df = _prepare_region_columns(df, "fuel_mix")
    validate_allowed_values(df, "fuel", FUEL_CATEGORIES, "fuel_mix")
    df["year"] = df["year"].astype(int)
    df["fuel"] = fuel_categorical(df["fuel"].astype(str))
    return _prepare_numeric(df, ["quads", "frac"])


def prepare_td_values(df: pd.DataFrame) -> pd.DataFrame:
    """Validate and normalise the top-down projected values table.

    Stored ratio columns, if any, are dropped since ratios are always
    derived from P, G, E and F.
    """
    df = _prepare_region_columns(df, "td_values")
    df = df.drop(columns=["g", "e", "f", "ef"], errors="ignore")
    df["year"] = df["year"].astype(int)
    return _prepare_numeric(df, ["P", "G", "E", "F"])


def prepare_td_trends(df: pd.DataFrame) -> pd.DataFrame:
    """Validate and normalise the top-down trends table.

    Stored ratio columns, if any, are dropped since trend ratios are always
    derived from the trends in P, G, E and F.
    """
    df = _prepare_region_columns(df, "td_trends")
    df = df.drop(columns=["g", "e", "f", "ef"], errors="ignore")
    return _prepare_numeric(df, ["P", "G", "E", "F"])


def load_kaya_data(path: Path) -> pd.DataFrame:
    """Load the historical Kaya table from a CSV file."""
    return prepare_kaya_data(_read_table_csv(path, "kaya_data"))


def load_fuel_mix(path: Path) -> pd.DataFrame:
    """Load the fuel mix table from a CSV file."""
    return prepare_fuel_mix(_read_table_csv(path, "fuel_mix"))


def load_td_values(path: Path) -> pd.DataFrame:
    """Load the top-down projected values table from a CSV file."""
    return prepare_td_values(_read_table_csv(path, "td_values"))


def load_td_trends(path: Path) -> pd.DataFrame:
    """Load the top-down trends table from a CSV file."""
    return prepare_td_trends(_read_table_csv(path, "td_trends"))
