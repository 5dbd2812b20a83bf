"""Upstream data source URL configuration for kayadata.

This module provides centralized configuration for the URLs of the
statistical sources the bundled tables are extracted from, making it easy
to update links when a source moves.
"""

import os

# Energy Institute Statistical Review downloads page
# Can be overridden via KAYADATA_ENERGY_URL environment variable
ENERGY_INSTITUTE_URL = os.environ.get(
    "KAYADATA_ENERGY_URL",
    "https://www.energyinst.org/statistical-review/resources-and-data-downloads",
)

WORLD_BANK_INDICATOR_URL = "https://data.worldbank.org/indicator"


def world_bank_url(indicator: str) -> str:
    """Generate a World Bank indicator URL from an indicator code.

    Args:
        indicator: World Bank indicator code (e.g., 'SP.POP.TOTL')

    Returns
    -------
        Full URL to the indicator page.

    Examples
    --------
        >>> world_bank_url("SP.POP.TOTL")
        'https://data.worldbank.org/indicator/SP.POP.TOTL'
    """
    return f"{WORLD_BANK_INDICATOR_URL}/{indicator.strip('/')}"


# Where each variable of the bundled tables comes from
DATA_SOURCE_URLS = {
    "P": world_bank_url("SP.POP.TOTL"),
    "G_mer": world_bank_url("NY.GDP.MKTP.KD"),
    "G_ppp": world_bank_url("NY.GDP.MKTP.PP.KD"),
    "E": ENERGY_INSTITUTE_URL,
    "F": ENERGY_INSTITUTE_URL,
    "fuel_mix": ENERGY_INSTITUTE_URL,
    "top_down": "https://www.eia.gov/outlooks/archive/ieo17/",
}
