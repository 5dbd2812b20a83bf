"""
Fuel mix of primary energy supply for countries and regions.

Only the most recent year reported for each region is returned. Regions are
independent: one region's latest year may differ from another's.

Note that in the 2022 data from the Energy Institute's Statistical Review the
fuel shares of Hong Kong and Sri Lanka add up to 98.7% and 102.9%, and their
sums in quads are off by -0.095 and +0.095 quads from total primary energy.
These values are returned as published.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from kayadata.library.diagnostics import (
    DiagnosticSink,
    report_no_data,
    resolve_sink,
)
from kayadata.library.regions import requested_regions
from kayadata.library.tables import KayaTables, resolve_tables
from kayadata.library.utils.dataframes import (
    FUEL_CATEGORIES,
    KayaDataFrame,
    filter_regions,
    fuel_categorical,
)

logger = logging.getLogger(__name__)

FUEL_MIX_COLUMNS = ["region", "year", "fuel", "quads", "frac"]

COLLAPSED_FUEL_CATEGORIES = tuple(fuel for fuel in FUEL_CATEGORIES if fuel != "Hydro")
"""Fuels that can appear as rows once hydro is folded into renewables."""


def latest_year_per_region(data: pd.DataFrame) -> pd.DataFrame:
    """Keep only the rows from each region's own most recent year."""
    latest = data.groupby("region", sort=False)["year"].transform("max")
    return data.loc[data["year"] == latest].reset_index(drop=True)


def collapse_renewable_categories(data: pd.DataFrame) -> pd.DataFrame:
    """
    Fold hydroelectricity into the renewables category.

    Hydro rows are relabelled as Renewables, and quads and fractions are
    summed within each region, year and fuel, with missing values counting
    as zero. A region that reported both Hydro and Renewables ends up with a
    single Renewables row.

    Parameters
    ----------
    data
        Fuel mix rows with columns ``region``, ``year``, ``fuel``, ``quads``
        and ``frac``

    Returns
    -------
    pd.DataFrame
        Collapsed rows, with ``fuel`` an ordered categorical over all the
        fuel categories. Hydro remains a category but no row carries it.
    """
    fuel = data["fuel"].astype(str).replace({"Hydro": "Renewables"})
    relabelled = data.assign(fuel=fuel_categorical(fuel, FUEL_CATEGORIES))
    return (
        relabelled.groupby(["region", "year", "fuel"], sort=False, observed=True)[
            ["quads", "frac"]
        ]
        .sum(min_count=0)
        .reset_index()
    )


def get_fuel_mix(
    region_name: str | Sequence[str] | None = None,
    collapse_renewables: bool = True,
    quiet: bool = False,
    region_code: str | Sequence[str] | None = None,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> KayaDataFrame:
    """
    Get fuel mix for one or more countries or regions.

    Parameters
    ----------
    region_name
        The names of one or more countries or regions to look up
    collapse_renewables
        Combine hydroelectricity and other renewables into a single category
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
        The quads of each fuel and the fraction of total primary energy it
        supplies, for the latest year of each country or region, sorted by
        region and then by fuel category. Columns:

        - ``region``: name of the country or region
        - ``year``: the year reported
        - ``fuel``: the fuel, an ordered categorical
        - ``quads``: quads per year of that fuel
        - ``frac``: fraction of the region's primary energy from that fuel

    Examples
    --------
    >>> get_fuel_mix("United States")  # doctest: +SKIP
    >>> get_fuel_mix("World", collapse_renewables=False)  # doctest: +SKIP
    >>> get_fuel_mix(region_code="LCN")  # doctest: +SKIP
    """
    tables = resolve_tables(tables)
    sink = resolve_sink(diagnostics)

    region_names, codes = requested_regions(
        region_name, region_code, "fuel_mix", quiet, tables=tables, diagnostics=sink
    )

    data = filter_regions(tables.fuel_mix, region_names)[FUEL_MIX_COLUMNS]
    data = latest_year_per_region(data)

    if collapse_renewables and not data.empty:
        data = collapse_renewable_categories(data)

    logger.debug("Fuel mix query for %s: %d rows", region_names, len(data))
    if data.empty and not quiet:
        report_no_data(sink, region_names, codes)

    return data.sort_values(["region", "fuel"], kind="stable").reset_index(drop=True)
