"""
Static registry of accepted column types.

Maps each schema builder column type to (required_args, optional_args). The
counts include the column name, which is always the first argument.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

COLUMN_TYPES: Dict[str, Tuple[int, int]] = {
    # Auto-incrementing keys
    "increments": (1, 0),
    "tinyIncrements": (1, 0),
    "smallIncrements": (1, 0),
    "mediumIncrements": (1, 0),
    "bigIncrements": (1, 0),
    # Strings
    "char": (1, 1),
    "string": (1, 1),
    "text": (1, 0),
    "mediumText": (1, 0),
    "longText": (1, 0),
    # Integers: (column, autoIncrement, unsigned)
    "integer": (1, 2),
    "tinyInteger": (1, 2),
    "smallInteger": (1, 2),
    "mediumInteger": (1, 2),
    "bigInteger": (1, 2),
    # Unsigned integers: (column, autoIncrement)
    "unsignedInteger": (1, 1),
    "unsignedTinyInteger": (1, 1),
    "unsignedSmallInteger": (1, 1),
    "unsignedMediumInteger": (1, 1),
    "unsignedBigInteger": (1, 1),
    # Numerics: (column, total, places)
    "float": (1, 2),
    "double": (1, 2),
    "decimal": (1, 2),
    "unsignedDecimal": (1, 2),
    "boolean": (1, 0),
    "enum": (2, 0),
    "json": (1, 0),
    "jsonb": (1, 0),
    # Dates and times: (column, precision)
    "date": (1, 0),
    "dateTime": (1, 1),
    "dateTimeTz": (1, 1),
    "time": (1, 1),
    "timeTz": (1, 1),
    "timestamp": (1, 1),
    "timestampTz": (1, 1),
    "year": (1, 0),
    # Column groups with no name of their own
    "timestamps": (0, 1),
    "nullableTimestamps": (0, 1),
    "timestampsTz": (0, 1),
    "softDeletes": (0, 2),
    "softDeletesTz": (0, 2),
    "rememberToken": (0, 0),
    # Misc
    "binary": (1, 0),
    "uuid": (1, 0),
    "ipAddress": (1, 0),
    "macAddress": (1, 0),
    "morphs": (1, 1),
    "nullableMorphs": (1, 1),
    # Spatial
    "geometry": (1, 0),
    "point": (1, 0),
    "lineString": (1, 0),
    "polygon": (1, 0),
    "geometryCollection": (1, 0),
    "multiPoint": (1, 0),
    "multiLineString": (1, 0),
    "multiPolygon": (1, 0),
}


def get_arity(column_type: str) -> Optional[Tuple[int, int]]:
    """Return (required, optional) argument counts, or None for unknown types."""
    return COLUMN_TYPES.get(column_type)


def is_valid_type(column_type: str) -> bool:
    return column_type in COLUMN_TYPES
