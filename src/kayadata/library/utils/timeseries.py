"""Time-series functions for the kayadata library.

This module handles piecewise-linear interpolation of the sparse top-down
projection points to an arbitrary year.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd


def interpolate_to_year(
    years: Sequence[float] | np.ndarray,
    values: Sequence[float] | np.ndarray,
    target_year: float,
) -> float:
    """
    Linearly interpolate a series of ``(year, value)`` knots to ``target_year``.

    Knots with a missing year or value are dropped, and knots sharing a year
    are averaged. Interpolation needs at least two distinct years; with a
    single knot the result is that knot's value at its own year and NaN
    anywhere else. Targets outside the knots' span give NaN rather than being
    extrapolated.

    Parameters
    ----------
    years
        Years of the knots, in any order
    values
        Values at the knots
    target_year
        Year to interpolate to

    Returns
    -------
    float
        Interpolated value, or NaN if it is undefined

    Examples
    --------
    >>> interpolate_to_year([2020, 2030], [1.0, 2.0], 2025)
    1.5
    """
    knots = pd.DataFrame(
        {"year": np.asarray(years, dtype=float), "value": np.asarray(values, dtype=float)}
    ).dropna()
    if knots.empty:
        return np.nan

    knots = knots.groupby("year", sort=True)["value"].mean()
    x = knots.index.to_numpy()
    y = knots.to_numpy()

    if len(x) == 1:
        return float(y[0]) if target_year == x[0] else np.nan
    if target_year < x[0] or target_year > x[-1]:
        return np.nan
    return float(np.interp(target_year, x, y))


def interpolate_groups_to_year(
    df: pd.DataFrame,
    target_year: float,
    value_columns: Sequence[str],
    group_column: str = "region",
    year_column: str = "year",
) -> pd.DataFrame:
    """
    Interpolate each value column to ``target_year`` separately for each group.

    Parameters
    ----------
    df
        Long-format DataFrame with ``group_column``, ``year_column`` and the
        value columns
    target_year
        Year to interpolate to
    value_columns
        Columns to interpolate, each one independently of the others
    group_column
        Column identifying the series (one output row per group)
    year_column
        Column holding the knot years

    Returns
    -------
    pd.DataFrame
        One row per group, in order of first appearance in ``df``, with
        ``group_column``, ``year_column`` (set to ``target_year``) and the
        interpolated value columns
    """
    rows = []
    for group, group_df in df.groupby(group_column, sort=False, observed=True):
        row = {group_column: group, year_column: target_year}
        for col in value_columns:
            row[col] = interpolate_to_year(
                group_df[year_column], group_df[col], target_year
            )
        rows.append(row)

    return pd.DataFrame(rows, columns=[group_column, year_column, *value_columns])
