"""DataFrame utilities for the kayadata library.

This module provides utilities for working with Kaya identity tables including:
- Type definitions (KayaDataFrame)
- Column and category constants shared by the tables
- Row filtering by region
- Derivation of the Kaya ratios g, e, f and ef
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

__all__ = [
    # Type definition
    "KayaDataFrame",
    # Constants
    "FUEL_CATEGORIES",
    "GEOGRAPHIES",
    "KAYA_VARIABLES",
    "KAYA_RATIOS",
    # Helpers
    "as_str_list",
    "derive_kaya_ratios",
    "derive_trend_ratios",
    "filter_regions",
    "fuel_categorical",
]


# ============================================================================
# Type Definitions
# ============================================================================

KayaDataFrame = pd.DataFrame
"""A pandas DataFrame in long format with one row per region (and year).

Example:

    region         year  P      G      E      F       g     e     f     ef
0   Brazil         2015  0.205  1.802  12.64  498.0   8.81  7.01  39.4  276
1   Brazil         2016  0.206  1.809  12.74  499.0   8.77  7.04  39.2  276
...
"""


# ============================================================================
# Constants
# ============================================================================

FUEL_CATEGORIES: tuple[str, ...] = (
    "Coal",
    "Natural Gas",
    "Oil",
    "Nuclear",
    "Hydro",
    "Renewables",
)
"""Fuel categories of the fuel mix table, in reporting order."""

GEOGRAPHIES: tuple[str, ...] = ("nation", "region", "world")

KAYA_VARIABLES: tuple[str, ...] = ("P", "G", "E", "F")
"""Population, GDP, primary energy and emissions."""

KAYA_RATIOS: tuple[str, ...] = ("g", "e", "f", "ef")
"""Per-capita GDP, energy intensity, carbon intensity of energy and of GDP."""


# ============================================================================
# Helpers
# ============================================================================


def as_str_list(value: str | Sequence[str] | None) -> list[str]:
    """Normalise a single name or a sequence of names to a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def filter_regions(df: KayaDataFrame, region_names: Sequence[str]) -> KayaDataFrame:
    """Return a copy of the rows of ``df`` whose region is in ``region_names``.

    Rows keep the order of ``df``, not the order of ``region_names``.
    """
    mask = df["region"].isin(list(region_names))
    return df.loc[mask].reset_index(drop=True)


def derive_kaya_ratios(df: KayaDataFrame) -> KayaDataFrame:
    """Compute g, e, f and ef as ratios of the levels P, G, E and F.

    Parameters
    ----------
    df
        DataFrame with columns ``P``, ``G``, ``E`` and ``F``

    Returns
    -------
    KayaDataFrame
        Copy of ``df`` with ``g = G/P``, ``e = E/G``, ``f = F/E`` and
        ``ef = F/G`` set
    """
    return df.assign(
        g=df["G"] / df["P"],
        e=df["E"] / df["G"],
        f=df["F"] / df["E"],
        ef=df["F"] / df["G"],
    )


def derive_trend_ratios(df: KayaDataFrame) -> KayaDataFrame:
    """Compute trends in g, e, f and ef from log-rate trends in P, G, E and F.

    The growth rate of a ratio is approximated to first order by the
    difference of the growth rates of numerator and denominator, so
    ``g = G - P``, ``e = E - G``, ``f = F - E`` and ``ef = F - G``.
    """
    return df.assign(
        g=df["G"] - df["P"],
        e=df["E"] - df["G"],
        f=df["F"] - df["E"],
        ef=df["F"] - df["G"],
    )


def fuel_categorical(
    values: Sequence[str] | pd.Series,
    categories: Sequence[str] = FUEL_CATEGORIES,
) -> pd.Categorical:
    """Wrap fuel labels in an ordered categorical over ``categories``."""
    return pd.Categorical(values, categories=list(categories), ordered=True)
