"""
Static reference tables for energy and emissions calculations.

These are small constant tables that accompany the Kaya data: emission
factors of the fuels in the fuel mix, and the size and capacity factor of
typical power plants for working out how many plants it takes to supply a
given amount of energy.
"""

from __future__ import annotations

import pandas as pd

from kayadata.library.utils.dataframes import FUEL_CATEGORIES, fuel_categorical

# Million metric tons of CO2 per quad of primary energy
_EMISSION_FACTORS = {
    "Coal": 94.4,
    "Oil": 70.0,
    "Natural Gas": 53.1,
    "Nuclear": 0.0,
    "Hydro": 0.0,
    "Renewables": 0.0,
}

# fuel, description, nameplate capacity (MW), capacity factor
# For wind turbine capacity factors, see
# * US DOE EERE (2019) 2018 Wind Technologies Market Report
# * IEA Offshore Wind Outlook 2019
_GENERATION_CAPACITY = [
    ("Coal", "Large coal-fired power plant", 1000, 0.53),
    ("Nuclear", "Large nuclear power plant", 1000, 0.75),
    ("Natural Gas", "Gas-fired power plant", 500, 0.56),
    ("Photovoltaic Solar", "Photovoltaic solar farm", 100, 0.25),
    ("Solar Thermal", "Concentrated solar-thermal power plant", 100, 0.25),
    ("Onshore Wind", "Onshore wind turbine", 6, 0.42),
    ("Offshore Wind", "Offshore wind turbine", 13, 0.50),
]


def emissions_factors(collapse_renewables: bool = True) -> pd.DataFrame:
    """
    Get emission factors for different energy sources.

    Parameters
    ----------
    collapse_renewables
        Combine hydroelectricity and other renewables into a single category,
        as :func:`~kayadata.library.kaya.get_fuel_mix` does by default. The
        Hydro row is dropped but Hydro stays a category of ``fuel``.

    Returns
    -------
    pd.DataFrame
        Columns ``fuel`` (ordered categorical over the fuel categories) and
        ``emission_factor`` in million metric tons of CO2 per quad, sorted by
        fuel

    Examples
    --------
    >>> emissions_factors()["fuel"].tolist()
    ['Coal', 'Natural Gas', 'Oil', 'Nuclear', 'Renewables']
    """
    fuels = [fuel for fuel in FUEL_CATEGORIES if fuel in _EMISSION_FACTORS]
    if collapse_renewables:
        fuels.remove("Hydro")

    return pd.DataFrame(
        {
            "fuel": fuel_categorical(fuels),
            "emission_factor": [_EMISSION_FACTORS[fuel] for fuel in fuels],
        }
    )


def generation_capacity() -> pd.DataFrame:
    """
    Get nameplate capacity and capacity factors of electricity generation.

    The average power a plant supplies over a year is its nameplate capacity
    times its capacity factor. Data for fossil fuels comes from the EIA.

    Returns
    -------
    pd.DataFrame
        Columns:

        - ``fuel``: energy source
        - ``description``: text description of the power source
        - ``nameplate_capacity``: maximum sustained power output, in megawatts
        - ``capacity_factor``: fraction of the nameplate capacity the plant
          provides, averaged over a typical year

    References
    ----------
    Energy Information Administration (2018) "Electric Power Monthly,"
    October 2018, Table 6.7.A.

    Pielke, Jr., Roger A., *The Climate Fix* (Basic Books, 2010).
    """
    return pd.DataFrame(
        _GENERATION_CAPACITY,
        columns=["fuel", "description", "nameplate_capacity", "capacity_factor"],
    )


def megawatts_per_quad() -> float:
    """
    The number of megawatts it takes to replace a quad.

    Returns
    -------
    float
        Megawatts of average electrical output over a year that produce one
        quad of primary-energy-equivalent electricity
    """
    return 1.1e4
