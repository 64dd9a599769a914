"""Hypothesis strategies for simplelocalization property-based testing.

Usage:
    from tests.strategies import string_names, string_values, string_schemas
"""

from .strings import (
    resource_tables,
    string_names,
    string_schemas,
    string_values,
)

__all__ = [
    "resource_tables",
    "string_names",
    "string_schemas",
    "string_values",
]
