"""
Utility functions for the kayadata library.

"""

from kayadata.library.utils.dataframes import (
    FUEL_CATEGORIES,
    GEOGRAPHIES,
    KAYA_RATIOS,
    KAYA_VARIABLES,
    KayaDataFrame,
    as_str_list,
    derive_kaya_ratios,
    derive_trend_ratios,
    filter_regions,
    fuel_categorical,
)
from kayadata.library.utils.timeseries import (
    interpolate_groups_to_year,
    interpolate_to_year,
)

from .units import EJ, MTOE, convert_energy, get_default_unit_registry

__all__ = [
    "EJ",
    "FUEL_CATEGORIES",
    "GEOGRAPHIES",
    "KAYA_RATIOS",
    "KAYA_VARIABLES",
    "MTOE",
    "KayaDataFrame",
    "as_str_list",
    "convert_energy",
    "derive_kaya_ratios",
    "derive_trend_ratios",
    "filter_regions",
    "fuel_categorical",
    "get_default_unit_registry",
    "interpolate_groups_to_year",
    "interpolate_to_year",
]
