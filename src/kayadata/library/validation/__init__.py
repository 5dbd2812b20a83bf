"""
Validation functions for Kaya identity tables and query parameters.

"""

from __future__ import annotations

from kayadata.library.validation.inputs import (
    GDP_CONVENTIONS,
    TABLE_COLUMNS,
    validate_allowed_values,
    validate_gdp_convention,
    validate_projection_year,
    validate_required_columns,
    validate_table_name,
)

__all__ = [
    "GDP_CONVENTIONS",
    "TABLE_COLUMNS",
    "validate_allowed_values",
    "validate_gdp_convention",
    "validate_projection_year",
    "validate_required_columns",
    "validate_table_name",
]
