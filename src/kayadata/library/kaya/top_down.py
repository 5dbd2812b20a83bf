"""
Top-down projections of Kaya variables.

Projections come from the U.S. Energy Information Administration's
International Energy Outlook 2017. Two tables back these queries:

- projected values of P, G, E and F for a sparse set of years, from which
  g, e, f and ef are derived as ratios;
- trends of P, G, E and F as log-rates in fraction per year, from which the
  trends of g, e, f and ef are derived as differences (the growth rate of a
  ratio is, to first order, the growth rate of its numerator minus that of
  its denominator).

:func:`project_to_year` interpolates the projected values linearly between
the stored years.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kayadata.library.diagnostics import (
    DiagnosticSink,
    report_no_data,
    resolve_sink,
)
from kayadata.library.regions import requested_regions
from kayadata.library.tables import KayaTables, resolve_tables
from kayadata.library.utils.dataframes import (
    KAYA_VARIABLES,
    KayaDataFrame,
    derive_kaya_ratios,
    derive_trend_ratios,
    filter_regions,
)
from kayadata.library.utils.timeseries import interpolate_groups_to_year
from kayadata.library.validation import validate_projection_year

logger = logging.getLogger(__name__)

TREND_COLUMNS = ["region", "P", "G", "g", "E", "F", "e", "f", "ef"]
VALUE_COLUMNS = ["region", "year", "P", "G", "g", "E", "F", "e", "f", "ef"]


def get_trends(
    region_name: str | Sequence[str] | None = None,
    quiet: bool = False,
    region_code: str | Sequence[str] | None = None,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> KayaDataFrame:
    """
    Get top-down trends of Kaya variables for one or more countries or regions.

    Parameters
    ----------
    region_name
        The name of one or more countries or regions to look up
    quiet
        Suppress the diagnostic if there is no data for the countries or
        regions
    region_code
        Optional three-letter country or region codes to look up instead of
        ``region_name``
    tables
        Tables to read from, the default tables if None
    diagnostics
        Sink for diagnostics; if None, they are issued as NoDataWarning

    Returns
    -------
    KayaDataFrame
        Trends of P, G, g, E, F, e, f and ef in fraction per year, one row
        per country or region

    Examples
    --------
    >>> get_trends("Spain")  # doctest: +SKIP
    >>> get_trends(region_code="RUS")  # doctest: +SKIP
    """
    tables = resolve_tables(tables)
    sink = resolve_sink(diagnostics)

    region_names, codes = requested_regions(
        region_name, region_code, "td_trends", quiet, tables=tables, diagnostics=sink
    )

    data = derive_trend_ratios(filter_regions(tables.td_trends, region_names))
    logger.debug("Top-down trends for %s: %d rows", region_names, len(data))

    if data.empty and not quiet:
        report_no_data(sink, region_names, codes)

    return data[TREND_COLUMNS]


def get_projected_values(
    region_name: str | Sequence[str] | None = None,
    quiet: bool = False,
    region_code: str | Sequence[str] | None = None,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> KayaDataFrame:
    """
    Get top-down projections of Kaya variables for one or more countries or
    regions.

    Parameters
    ----------
    region_name
        The name of one or more countries or regions to look up
    quiet
        Suppress the diagnostic if there is no data for the countries or
        regions
    region_code
        Optional three-letter country or region codes to look up instead of
        ``region_name``
    tables
        Tables to read from, the default tables if None
    diagnostics
        Sink for diagnostics; if None, they are issued as NoDataWarning

    Returns
    -------
    KayaDataFrame
        One row per country or region and projection year, with columns
        ``region``, ``year``, ``P``, ``G``, ``g``, ``E``, ``F``, ``e``,
        ``f`` and ``ef`` in the units of :func:`get_historical` (GDP at
        market exchange rates)

    Examples
    --------
    >>> get_projected_values("OECD")  # doctest: +SKIP
    >>> get_projected_values(region_code="JPN")  # doctest: +SKIP
    """
    tables = resolve_tables(tables)
    sink = resolve_sink(diagnostics)

    region_names, codes = requested_regions(
        region_name, region_code, "td_values", quiet, tables=tables, diagnostics=sink
    )

    data = derive_kaya_ratios(filter_regions(tables.td_values, region_names))
    logger.debug("Top-down values for %s: %d rows", region_names, len(data))

    if data.empty and not quiet:
        report_no_data(sink, region_names, codes)

    return data[VALUE_COLUMNS]


def project_to_year(
    region_name: str | Sequence[str] | None = None,
    year: float | None = None,
    quiet: bool = False,
    region_code: str | Sequence[str] | None = None,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> KayaDataFrame:
    """
    Get top-down projections of Kaya variables for a given year.

    P, G, E and F are each interpolated linearly between the region's stored
    projection years, and g, e, f and ef are then derived from the
    interpolated values. A region with a single stored year only has values
    at that year; at any other year its values are NaN.

    Parameters
    ----------
    region_name
        The name of a country or region to look up
    year
        The year to project to. It must lie between the first and last years
        of the top-down table.
    quiet
        Suppress the diagnostic if there is no data for the country or region
    region_code
        Optional three-letter country or region code to look up instead of
        ``region_name``
    tables
        Tables to read from, the default tables if None
    diagnostics
        Sink for diagnostics; if None, they are issued as NoDataWarning

    Returns
    -------
    KayaDataFrame
        One row per country or region, with columns ``region``, ``year``
        (the requested year), ``P``, ``G``, ``g``, ``E``, ``F``, ``e``,
        ``f`` and ``ef``

    Raises
    ------
    InputValidationError
        If ``year`` is not given, or if neither ``region_name`` nor
        ``region_code`` is given
    YearOutOfRangeError
        If ``year`` is outside the years of the top-down table

    Examples
    --------
    >>> project_to_year("China", 2037)  # doctest: +SKIP
    >>> project_to_year(region_code="USA", year=2043)  # doctest: +SKIP
    """
    tables = resolve_tables(tables)
    td_years = tables.td_values["year"]
    year = validate_projection_year(year, int(td_years.min()), int(td_years.max()))
    sink = resolve_sink(diagnostics)

    region_names, codes = requested_regions(
        region_name, region_code, "td_values", quiet, tables=tables, diagnostics=sink
    )

    knots = filter_regions(tables.td_values, region_names)
    data = derive_kaya_ratios(
        interpolate_groups_to_year(knots, year, list(KAYA_VARIABLES))
    )
    logger.debug("Projected %s to %s: %d rows", region_names, year, len(data))

    # A code that failed to resolve has already been reported.
    if data.empty and codes is None and not quiet:
        report_no_data(sink, region_names)

    return data[VALUE_COLUMNS]
