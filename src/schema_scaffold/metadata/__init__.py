"""
Schema description loading and validation.

Provides the YAML schema loader, the static column-type registry used to
validate column declarations, and the sample schema used by ``scaffold init``.
"""

from schema_scaffold.metadata.column_types import COLUMN_TYPES, get_arity, is_valid_type
from schema_scaffold.metadata.example import EXAMPLE_SCHEMA, write_example_schema
from schema_scaffold.metadata.loader import SchemaLoader, load_schema, schema_from_dict

__all__ = [
    "COLUMN_TYPES",
    "get_arity",
    "is_valid_type",
    "EXAMPLE_SCHEMA",
    "write_example_schema",
    "SchemaLoader",
    "load_schema",
    "schema_from_dict",
]
