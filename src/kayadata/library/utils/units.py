"""
Energy unit constants and conversion utilities.

This module provides:
- Conversion constants between quads and other common energy units
- A configured Pint registry with the energy units used by the Kaya tables
- Conversion of plain values between those units
"""

from __future__ import annotations

import functools

import pint

from kayadata.library.exceptions import InputValidationError

# Quads per million tonnes of oil equivalent
MTOE = 1 / 25.2

# Quads per exajoule
EJ = 0.947817120


# ============================================================================
# Unit Registry
# ============================================================================


@functools.cache
def get_default_unit_registry() -> pint.UnitRegistry:
    """
    Get the default unit registry to use throughout the codebase.

    Pint already defines the energy units that appear in the Kaya tables and
    in energy statistics releases: ``quad`` (a quadrillion British thermal
    units, the unit of E), ``toe`` (tonne of oil equivalent, so ``Mtoe``
    parses with the mega prefix) and ``J`` (so ``EJ`` parses with the exa
    prefix).

    Returns
    -------
    :
        Configured unit registry
    """
    return pint.UnitRegistry()


# ============================================================================
# Unit Conversion
# ============================================================================


def convert_energy(
    value: float,
    from_unit: str,
    to_unit: str = "quad",
    ur: pint.UnitRegistry | None = None,
) -> float:
    """
    Convert an energy value between units.

    Parameters
    ----------
    value
        Magnitude to convert
    from_unit
        Unit of ``value``, e.g. ``"Mtoe"``, ``"EJ"`` or ``"quad"``
    to_unit
        Target unit, quads by default
    ur
        Unit registry to use, the default registry if None

    Returns
    -------
    float
        Magnitude in ``to_unit``

    Raises
    ------
    InputValidationError
        If either unit is unknown or not an energy unit

    Examples
    --------
    >>> round(convert_energy(25.2, "Mtoe"), 3)
    1.0
    """
    if ur is None:
        ur = get_default_unit_registry()
    try:
        quantity = ur.Quantity(value, from_unit)
        return float(quantity.to(to_unit).magnitude)
    except (pint.UndefinedUnitError, pint.DimensionalityError) as e:
        raise InputValidationError(
            f"Cannot convert {value} {from_unit} to {to_unit}: {e}"
        ) from e
