"""
Exception hierarchy for schema_scaffold.

All errors raised by the package derive from ScaffoldError so callers can
abort a run with a single except clause.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for all scaffold errors."""


class SchemaValidationError(ScaffoldError):
    """The schema description is malformed."""


class AmbiguousNamingError(ScaffoldError):
    """A table name has more than one underscore and cannot be classified."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(
            f"Table '{table_name}' has multiple underscores. "
            "Pivot tables must be named <singular>_<singular>."
        )


class UnresolvedSingularError(ScaffoldError):
    """No table is declared with the requested singular name."""

    def __init__(self, singular: str):
        self.singular = singular
        super().__init__(f"No table has the singular name '{singular}'")


class FrozenRelationshipSetError(ScaffoldError):
    """A relationship was added after inverse synthesis completed."""
