"""
Error message templates for Kaya identity queries.

Fatal messages follow WHAT/CAUSE/FIX structure. Messages for non-fatal
diagnostics are a single line, since they are routinely collected or
surfaced as warnings.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "no_region_data": "There is no data for country or region {regions}",
    "unknown_region_code": "There is no country or region with code {code}.",
    "ambiguous_region_code": (
        "Code {code} matches more than one country or region: {regions}."
    ),
    "invalid_gdp_convention": """
GDP convention '{gdp}' not recognized.

WHAT HAPPENED:
  The gdp argument must name a GDP convention.

LIKELY CAUSE:
  Possible typo in the convention name.

HOW TO FIX:
  {suggestion}

  Valid conventions:
  - 'MER': market exchange rates (constant 2015 U.S. dollars)
  - 'PPP': purchasing power parity (constant 2017 international dollars)
""",
    "invalid_table": """
Table '{table}' not recognized.

WHAT HAPPENED:
  Region codes can only be looked up in one of the built-in tables.

LIKELY CAUSE:
  Possible typo in the table name.

HOW TO FIX:
  {suggestion}
""",
    "missing_year": """
No projection year given.

WHAT HAPPENED:
  project_to_year() needs a target year to interpolate to.

HOW TO FIX:
  Pass the year explicitly:
  >>> project_to_year("China", year=2037)
""",
    "missing_region": """
No country or region given.

WHAT HAPPENED:
  Neither region_name nor region_code was passed to the query.

HOW TO FIX:
  Name the countries or regions, or give their three-letter codes:
  >>> get_historical("Brazil")
  >>> get_historical(region_code="BRA")
""",
    "missing_columns": """
Required columns missing from {dataset_name}.

WHAT HAPPENED:
  Expected columns: {expected}
  Missing columns: {missing}

LIKELY CAUSE:
  The file configured for {dataset_name} is not a Kaya identity table,
  or its header has been renamed.

HOW TO FIX:
  Check the header of the file and the path in your data sources config:
  >>> import pandas as pd
  >>> print(pd.read_csv(path, nrows=0).columns.tolist())
""",
    "invalid_categories": """
Unexpected {column} values in {dataset_name}.

WHAT HAPPENED:
  Found values: {found}
  Allowed values: {allowed}

LIKELY CAUSE:
  The table comes from a different release that uses other labels.

HOW TO FIX:
  Relabel the values to the allowed set before pointing the configuration
  at this file.
""",
    "missing_data_file": """
Data file not found for {dataset_name}.

WHAT HAPPENED:
  The configured path does not exist: {path}

LIKELY CAUSE:
  - The path in the data sources config is wrong
  - The path is relative and is resolved against the config file's directory

HOW TO FIX:
  Point {dataset_name}.path in your data sources YAML at an existing CSV
  file, or unset KAYADATA_CONFIG to use the bundled data.
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
