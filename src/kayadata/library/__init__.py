"""
Main components for the kayadata library.

Nothing is exported from this module, users should import from specific submodules
(or from the top-level ``kayadata`` package):
- kayadata.library.kaya (queries of the Kaya identity tables)
- kayadata.library.reference (emission factors and generation capacity)
- kayadata.library.tables (loading the backing tables)
- kayadata.library.utils (utility functions)
"""

from __future__ import annotations
