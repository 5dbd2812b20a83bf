"""
Kaya identity data for countries and regions.

Historical population, GDP, energy and emissions; fuel mix; and top-down
projections, with functions to query them.
"""

from kayadata.library.diagnostics import DiagnosticSink
from kayadata.library.exceptions import (
    InputValidationError,
    KayaDataError,
    NoDataWarning,
    YearOutOfRangeError,
)
from kayadata.library.kaya import (
    get_fuel_mix,
    get_historical,
    get_projected_values,
    get_trends,
    list_regions,
    project_to_year,
    region_codes,
    resolve_code,
)
from kayadata.library.reference import (
    emissions_factors,
    generation_capacity,
    megawatts_per_quad,
)
from kayadata.library.tables import KayaTables, get_default_tables, load_tables
from kayadata.library.utils.units import EJ, MTOE

__all__ = [
    "EJ",
    "MTOE",
    "DiagnosticSink",
    "InputValidationError",
    "KayaDataError",
    "KayaTables",
    "NoDataWarning",
    "YearOutOfRangeError",
    "emissions_factors",
    "generation_capacity",
    "get_default_tables",
    "get_fuel_mix",
    "get_historical",
    "get_projected_values",
    "get_trends",
    "list_regions",
    "load_tables",
    "megawatts_per_quad",
    "project_to_year",
    "region_codes",
    "resolve_code",
]
