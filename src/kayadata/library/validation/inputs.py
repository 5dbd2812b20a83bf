"""
Input validation for Kaya identity tables and query parameters.

Validation functions:
- Column presence checks for each backing table
- Allowed-value checks for categorical columns (geography, fuel)
- Query parameter checks (GDP convention, table name, projection year)

Table checks only concern structure. Values are never corrected, and known
inconsistencies in the upstream data are left in place.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from kayadata.library.error_messages import format_error, suggest_similar
from kayadata.library.exceptions import (
    DataProcessingError,
    InputValidationError,
    YearOutOfRangeError,
)

GDP_CONVENTIONS: tuple[str, ...] = ("MER", "PPP")

_REGION_COLUMNS = ["region", "region_code", "geography"]

TABLE_COLUMNS: dict[str, list[str]] = {
    "kaya_data": [
        *_REGION_COLUMNS,
        "year",
        "P",
        "G",
        "E",
        "F",
        "g",
        "e",
        "f",
        "ef",
        "G_ppp",
        "G_mer",
    ],
    "fuel_mix": [*_REGION_COLUMNS, "year", "fuel", "quads", "frac"],
    "td_values": [*_REGION_COLUMNS, "year", "P", "G", "E", "F"],
    "td_trends": [*_REGION_COLUMNS, "P", "G", "E", "F"],
}
"""Columns every backing table must provide. Extra columns are allowed."""


def validate_required_columns(
    df: pd.DataFrame,
    dataset_name_for_error_msg: str,
    expected_columns: Sequence[str] | None = None,
) -> None:
    """
    Validate that a table has all the columns its queries rely on.

    Parameters
    ----------
    df : pd.DataFrame
        Table to validate
    dataset_name_for_error_msg : str
        Name of the table, also used to look up its expected columns
    expected_columns : Sequence[str], optional
        Columns to require (default: ``TABLE_COLUMNS[dataset_name_for_error_msg]``)

    Raises
    ------
    DataProcessingError
        If any expected column is missing
    """
    if expected_columns is None:
        expected_columns = TABLE_COLUMNS[dataset_name_for_error_msg]

    missing = [col for col in expected_columns if col not in df.columns]
    if missing:
        raise DataProcessingError(
            format_error(
                "missing_columns",
                dataset_name=dataset_name_for_error_msg,
                expected=list(expected_columns),
                missing=missing,
            )
        )


def validate_allowed_values(
    df: pd.DataFrame,
    column: str,
    allowed: Sequence[str],
    dataset_name_for_error_msg: str,
) -> None:
    """
    Validate that a categorical column only holds known labels.

    Missing values are ignored.

    Raises
    ------
    DataProcessingError
        If the column holds a label outside ``allowed``
    """
    found = set(df[column].dropna().astype(str).unique())
    unexpected = sorted(found - set(allowed))
    if unexpected:
        raise DataProcessingError(
            format_error(
                "invalid_categories",
                column=column,
                dataset_name=dataset_name_for_error_msg,
                found=unexpected,
                allowed=list(allowed),
            )
        )


def validate_gdp_convention(gdp: str) -> str:
    """
    Validate a GDP convention flag.

    Parameters
    ----------
    gdp : str
        ``"MER"`` or ``"PPP"``. Matching is exact, so ``"ppp"`` is rejected.

    Returns
    -------
    str
        The validated convention

    Raises
    ------
    InputValidationError
        If ``gdp`` is not a known convention
    """
    if gdp not in GDP_CONVENTIONS:
        raise InputValidationError(
            format_error(
                "invalid_gdp_convention",
                gdp=gdp,
                suggestion=suggest_similar(str(gdp).upper(), list(GDP_CONVENTIONS)),
            )
        )
    return gdp


def validate_table_name(table: str) -> str:
    """
    Validate the name of a backing table.

    Raises
    ------
    InputValidationError
        If ``table`` is not one of the four built-in tables
    """
    if table not in TABLE_COLUMNS:
        raise InputValidationError(
            format_error(
                "invalid_table",
                table=table,
                suggestion=suggest_similar(str(table), list(TABLE_COLUMNS)),
            )
        )
    return table


def validate_projection_year(
    year: float | None, min_year: int, max_year: int
) -> float:
    """
    Validate that a projection year is given and lies within the table's years.

    Raises
    ------
    InputValidationError
        If ``year`` is None
    YearOutOfRangeError
        If ``year`` is before ``min_year`` or after ``max_year``
    """
    if year is None:
        raise InputValidationError(format_error("missing_year"))
    if year < min_year or year > max_year:
        raise YearOutOfRangeError(year, min_year, max_year)
    return year
