"""
Historical Kaya identity data for countries and regions.

The historical table stores the ratios g, e, f and ef computed with GDP at
market exchange rates. When GDP at purchasing power parity is requested, G
is replaced by the PPP column and every ratio that involves G is recomputed,
so the returned rows always satisfy ``g = G/P``, ``e = E/G`` and
``ef = F/G`` for the G they carry. ``f = F/E`` does not depend on GDP and is
returned as stored.
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
from kayadata.library.utils.dataframes import KayaDataFrame, filter_regions
from kayadata.library.validation import validate_gdp_convention

logger = logging.getLogger(__name__)

HISTORICAL_COLUMNS = ["region", "year", "P", "G", "E", "F", "g", "e", "f", "ef"]


def get_historical(
    region_name: str | Sequence[str] | None = None,
    gdp: str = "MER",
    quiet: bool = False,
    region_code: str | Sequence[str] | None = None,
    *,
    tables: KayaTables | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> KayaDataFrame:
    """
    Get Kaya data for one or more countries or regions.

    Parameters
    ----------
    region_name
        The name of one or more countries or regions to look up
    gdp
        Use market exchange rates (``"MER"``, default) or purchasing power
        parity (``"PPP"``)
    quiet
        Suppress the diagnostic if there is no such country or region
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
        One row per region and year, in table order, with columns:

        - ``region``: name of the country or region
        - ``year``: the year
        - ``P``: population, in billions
        - ``G``: GDP, in trillions of constant 2015 U.S. dollars (MER) or
          constant 2017 international dollars (PPP)
        - ``E``: total primary energy consumption, in quads
        - ``F``: CO2 emissions from fossil fuels, in millions of metric tons
        - ``g``: per-capita GDP, in thousands of dollars per person
        - ``e``: energy intensity of the economy, in quads per trillion dollars
        - ``f``: emissions intensity of energy, in million metric tons per quad
        - ``ef``: emissions intensity of the economy, in metric tons per
          million dollars

    Raises
    ------
    InputValidationError
        If ``gdp`` is not ``"MER"`` or ``"PPP"``, or if neither ``region_name``
        nor ``region_code`` is given

    Notes
    -----
    P and MER GDP are available from 1960, PPP GDP only from 1990, and the
    energy-related values (E, F and their ratios) from 1965. Years without a
    value hold NaN.

    Examples
    --------
    >>> get_historical("Brazil")  # doctest: +SKIP
    >>> get_historical("United Kingdom", "PPP")  # doctest: +SKIP
    >>> get_historical(region_code="MYS")  # doctest: +SKIP
    """
    gdp = validate_gdp_convention(gdp)
    tables = resolve_tables(tables)
    sink = resolve_sink(diagnostics)

    region_names, codes = requested_regions(
        region_name, region_code, "kaya_data", quiet, tables=tables, diagnostics=sink
    )

    data = filter_regions(tables.kaya_data, region_names)
    logger.debug("Historical query for %s: %d rows", region_names, len(data))

    if data.empty and not quiet:
        report_no_data(sink, region_names, codes)

    if gdp == "PPP":
        data = data.assign(G=data["G_ppp"])
        data = data.assign(
            g=data["G"] / data["P"],
            e=data["E"] / data["G"],
            ef=data["F"] / data["G"],
        )

    return data[HISTORICAL_COLUMNS]
