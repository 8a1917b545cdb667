"""
Pivot (junction) table classification.

A pivot table is named after two singular table labels joined by an
underscore, e.g. ``role_user`` for ``roles`` and ``users``.
"""

from __future__ import annotations

import logging
from typing import Tuple

from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.exceptions import AmbiguousNamingError

logger = logging.getLogger(__name__)

SEPARATOR = "_"


def pivot_parts(table_name: str) -> Tuple[str, ...]:
    """
    Split a table name into its pivot segments.

    Raises:
        AmbiguousNamingError: if the name has more than two segments
    """
    parts = tuple(table_name.split(SEPARATOR))
    if len(parts) > 2:
        raise AmbiguousNamingError(table_name)
    return parts


class PivotClassifier:
    """Decides whether a table name represents a many-to-many junction."""

    def __init__(self, schema_index: SchemaIndex):
        self.schema_index = schema_index

    def is_pivot_table(self, table_name: str) -> bool:
        """
        Check whether both halves of ``table_name`` are known singular labels.

        The two halves may resolve to the same table (self-referential pivot).

        Raises:
            AmbiguousNamingError: if the name has more than one underscore
        """
        if SEPARATOR not in table_name:
            return False

        parts = pivot_parts(table_name)
        if len(parts) < 2:
            return False

        first, second = parts
        is_pivot = self.schema_index.has_singular(first) and self.schema_index.has_singular(second)
        if is_pivot:
            logger.debug(f"{table_name} is a pivot table ({first} <-> {second})")
        return is_pivot
