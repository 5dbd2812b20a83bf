"""
Loading and preparation of the Kaya identity tables.

"""

from kayadata.library.preprocessing.loaders import (
    load_fuel_mix,
    load_kaya_data,
    load_td_trends,
    load_td_values,
    prepare_fuel_mix,
    prepare_kaya_data,
    prepare_td_trends,
    prepare_td_values,
)

__all__ = [
    "load_fuel_mix",
    "load_kaya_data",
    "load_td_trends",
    "load_td_values",
    "prepare_fuel_mix",
    "prepare_kaya_data",
    "prepare_td_trends",
    "prepare_td_values",
]
