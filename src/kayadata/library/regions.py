"""
Region index: lookup of country and region names from three-letter codes.

Region coverage differs between the backing tables, so a code is always
resolved against a particular table. The same code can name a region in one
table and nothing in another.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from kayadata.library.diagnostics import DiagnosticSink, resolve_sink
from kayadata.library.error_messages import format_error
from kayadata.library.exceptions import InputValidationError
from kayadata.library.tables import KayaTables, resolve_tables
from kayadata.library.utils.dataframes import as_str_list

logger = logging.getLogger(__name__)


def region_codes(
    table: str = "kaya_data", *, tables: KayaTables | None = None
) -> pd.DataFrame:
    """
    Get the distinct regions of a table with their codes and geography.

    Parameters
    ----------
    table
        Name of the table: ``"kaya_data"`` (default), ``"fuel_mix"``,
        ``"td_values"`` or ``"td_trends"``
    tables
        Tables to read from, the default tables if None

    Returns
    -------
    pd.DataFrame
        Columns ``region``, ``region_code`` and ``geography``, one row per
        distinct region, in table order
    """
    data = resolve_tables(tables).table(table)
    return (
        data[["region", "region_code", "geography"]]
        .drop_duplicates()
        .reset_index(drop=True)
    )


def resolve_code(
    region_code: str,
    table: str = "kaya_data",
    quiet: bool = False,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> str | None:
    """
    Look up a country or region name from its three-letter code.

    Parameters
    ----------
    region_code
        The three-letter country or region code. Matching is case-sensitive.
    table
        Name of the table to look the code up in (default ``"kaya_data"``)
    quiet
        Suppress the diagnostic if there is no such country or region
    tables
        Tables to read from, the default tables if None
    diagnostics
        Sink for the diagnostic; if None, it is issued as a NoDataWarning

    Returns
    -------
    str | None
        The corresponding country or region name, or None if no region, or
        more than one region, carries that code in ``table``

    Examples
    --------
    >>> resolve_code("MYS")  # doctest: +SKIP
    'Malaysia'
    """
    pairs = region_codes(table, tables=tables)[["region", "region_code"]]
    matches = pairs.loc[pairs["region_code"] == region_code, "region"].drop_duplicates()

    if len(matches) == 1:
        return str(matches.iloc[0])

    if not quiet:
        sink = resolve_sink(diagnostics)
        if len(matches) == 0:
            sink.report(format_error("unknown_region_code", code=region_code))
        else:
            sink.report(
                format_error(
                    "ambiguous_region_code",
                    code=region_code,
                    regions=", ".join(matches.astype(str)),
                )
            )
    logger.debug("Code %s did not resolve in %s", region_code, table)
    return None


def resolve_codes(
    region_code: str | Sequence[str],
    table: str,
    quiet: bool = False,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> list[str]:
    """
    Resolve one or more codes, keeping the names of those that resolve.

    Each code that does not resolve is reported by :func:`resolve_code`.
    """
    names = []
    for code in as_str_list(region_code):
        name = resolve_code(
            code, table, quiet, tables=tables, diagnostics=diagnostics
        )
        if name is not None:
            names.append(name)
    return names


def list_regions(*, tables: KayaTables | None = None) -> list[str]:
    """
    Get a list of the countries and regions in the historical Kaya data.

    Returns
    -------
    list[str]
        Country and region names, without duplicates, in the order they
        first appear in the historical table
    """
    data = resolve_tables(tables).kaya_data
    return [str(region) for region in pd.unique(data["region"])]


def requested_regions(
    region_name: str | Sequence[str] | None,
    region_code: str | Sequence[str] | None,
    table: str,
    quiet: bool = False,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> tuple[list[str], list[str] | None]:
    """
    Work out which region names a query should filter on.

    Codes, when given, take precedence over names and are resolved against
    ``table``.

    Returns
    -------
    tuple[list[str], list[str] | None]
        The region names to filter on, and the requested codes (None if the
        query was made by name)

    Raises
    ------
    InputValidationError
        If neither ``region_name`` nor ``region_code`` is given
    """
    if region_name is None and region_code is None:
        raise InputValidationError(format_error("missing_region"))
    if region_code is not None:
        codes = as_str_list(region_code)
        names = resolve_codes(
            codes, table, quiet, tables=tables, diagnostics=diagnostics
        )
        return names, codes
    return as_str_list(region_name), None
