"""
Query the Kaya identity tables from the command line.

"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import pandas as pd

from kayadata.library.config import DATA_SOURCE_URLS, TABLE_NAMES, load_data_config
from kayadata.library.diagnostics import DiagnosticSink
from kayadata.library.exceptions import KayaDataError
from kayadata.library.kaya import (
    get_fuel_mix,
    get_historical,
    get_projected_values,
    get_trends,
    project_to_year,
    region_codes,
)
from kayadata.library.reference import emissions_factors, generation_capacity
from kayadata.library.tables import KayaTables, load_tables


def _region_kwargs(args: argparse.Namespace) -> dict:
    if args.code:
        return {"region_code": args.regions}
    return {"region_name": args.regions}


def run_command(
    args: argparse.Namespace, tables: KayaTables, diagnostics: DiagnosticSink
) -> pd.DataFrame:
    """
    Run the query selected on the command line.

    Parameters
    ----------
    args
        Parsed command-line arguments
    tables
        Tables to query
    diagnostics
        Sink collecting "no data" diagnostics

    Returns
    -------
    pd.DataFrame
        The query result
    """
    common = {"quiet": args.quiet, "tables": tables, "diagnostics": diagnostics}

    if args.command == "regions":
        return region_codes(args.table, tables=tables)
    if args.command == "historical":
        return get_historical(gdp=args.gdp, **_region_kwargs(args), **common)
    if args.command == "fuel-mix":
        return get_fuel_mix(
            collapse_renewables=not args.no_collapse, **_region_kwargs(args), **common
        )
    if args.command == "trends":
        return get_trends(**_region_kwargs(args), **common)
    if args.command == "values":
        return get_projected_values(**_region_kwargs(args), **common)
    if args.command == "project":
        return project_to_year(year=args.year, **_region_kwargs(args), **common)
    if args.command == "factors":
        return emissions_factors(collapse_renewables=not args.no_collapse)
    if args.command == "capacity":
        return generation_capacity()
    if args.command == "sources":
        return pd.DataFrame(
            sorted(DATA_SOURCE_URLS.items()), columns=["variable", "source_url"]
        )
    raise KayaDataError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``kayadata`` command."""
    parser = argparse.ArgumentParser(
        prog="kayadata",
        description="Query Kaya identity data for countries and regions",
    )
    parser.add_argument("--config", help="Data sources YAML file")
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress 'no data' messages"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log debugging output"
    )
    parser.add_argument("--csv", action="store_true", help="Print results as CSV")

    subparsers = parser.add_subparsers(dest="command", required=True)

    regions = subparsers.add_parser("regions", help="List regions and their codes")
    regions.add_argument("--table", default="kaya_data", choices=TABLE_NAMES)

    def add_region_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("regions", nargs="+", help="Region names (or codes)")
        sub.add_argument(
            "--code",
            action="store_true",
            help="Treat the regions as three-letter codes",
        )

    historical = subparsers.add_parser("historical", help="Historical Kaya data")
    add_region_args(historical)
    historical.add_argument("--gdp", default="MER", help="MER (default) or PPP")

    fuel_mix = subparsers.add_parser("fuel-mix", help="Latest fuel mix")
    add_region_args(fuel_mix)
    fuel_mix.add_argument(
        "--no-collapse",
        action="store_true",
        help="Keep hydroelectricity separate from other renewables",
    )

    add_region_args(subparsers.add_parser("trends", help="Top-down trends"))
    add_region_args(subparsers.add_parser("values", help="Top-down projections"))

    project = subparsers.add_parser(
        "project", help="Top-down projection interpolated to a year"
    )
    add_region_args(project)
    project.add_argument("--year", type=float, required=True, help="Target year")

    factors = subparsers.add_parser("factors", help="Emission factors by fuel")
    factors.add_argument("--no-collapse", action="store_true")

    subparsers.add_parser("capacity", help="Power plant generation capacity")
    subparsers.add_parser("sources", help="Upstream data sources")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """
    Command-line interface for querying the Kaya identity tables.

    Usage
    -----
    From command line::

        kayadata historical Brazil
        kayadata historical "United Kingdom" --gdp PPP
        kayadata fuel-mix World --no-collapse
        kayadata project China --year 2037
        kayadata --csv values --code JPN
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    diagnostics = DiagnosticSink()
    try:
        tables = load_tables(load_data_config(args.config))
        result = run_command(args, tables, diagnostics)
    except KayaDataError as e:
        sep_line = "=" * 80
        print(f"\n{sep_line}", file=sys.stderr)
        print("KAYADATA QUERY FAILED", file=sys.stderr)
        print(sep_line, file=sys.stderr)
        print(str(e), file=sys.stderr)
        print(f"\n{sep_line}", file=sys.stderr)
        sys.exit(1)

    for message in diagnostics.messages:
        print(f"Warning: {message}", file=sys.stderr)

    if args.csv:
        result.to_csv(sys.stdout, index=False)
    else:
        print(result.to_string(index=False))


if __name__ == "__main__":
    main()
