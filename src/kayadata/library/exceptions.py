"""
Exceptions and warnings that are used throughout the kayadata library.

"""

from __future__ import annotations


class KayaDataError(Exception):
    """Base exception for kayadata library."""

    pass


class ConfigurationError(KayaDataError):
    """Raised when configuration is invalid or missing."""

    pass


class DataError(KayaDataError):
    """Base exception for data-related errors."""

    pass


class DataLoadingError(DataError):
    """Raised when data files cannot be loaded."""

    pass


class DataProcessingError(DataError):
    """Raised when a loaded table doesn't meet the expected schema."""

    pass


class ValidationError(KayaDataError):
    """Base exception for validation errors."""

    pass


class InputValidationError(ValidationError):
    """
    Raised when the parameters of a query are invalid.

    This covers unsupported GDP conventions, unknown table names and
    missing required arguments. These errors are never suppressed by
    ``quiet=True``.
    """

    pass


class YearOutOfRangeError(InputValidationError):
    """
    Raised when a projection year lies outside the top-down table.

    """

    def __init__(self, year: float, min_year: int, max_year: int) -> None:
        """
        Initialise the error

        Parameters
        ----------
        year
            The year that was requested

        min_year
            First year available in the top-down projections

        max_year
            Last year available in the top-down projections
        """
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        error_msg = (
            "Projecting top-down values only works for years between "
            f"{min_year} and {max_year}, got {year}."
        )
        super().__init__(error_msg)


class NoDataWarning(UserWarning):
    """Issued when a query matches no country or region."""

    pass
