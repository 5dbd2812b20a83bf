"""
Kaya identity queries.

Historical data, latest fuel mix, and top-down projections for countries
and regions.
"""

from kayadata.library.kaya.fuel_mix import collapse_renewable_categories, get_fuel_mix
from kayadata.library.kaya.historical import get_historical
from kayadata.library.kaya.top_down import (
    get_projected_values,
    get_trends,
    project_to_year,
)
from kayadata.library.regions import list_regions, region_codes, resolve_code

__all__ = [
    "collapse_renewable_categories",
    "get_fuel_mix",
    "get_historical",
    "get_projected_values",
    "get_trends",
    "list_regions",
    "project_to_year",
    "region_codes",
    "resolve_code",
]
