"""
Read-only index over the declared tables.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from schema_scaffold.exceptions import UnresolvedSingularError
from schema_scaffold.models import TableSpec


class SchemaIndex:
    """
    Lookup view over table definitions, keyed by plural table name.

    Iteration follows declaration order of the mapping it was built from.
    """

    def __init__(self, tables: Dict[str, TableSpec]):
        self._tables: Dict[str, TableSpec] = dict(tables)

    def lookup_table(self, name: str) -> Optional[TableSpec]:
        """Get table by name."""
        return self._tables.get(name)

    def singular_of(self, name: str) -> Optional[str]:
        """Get the singular label of a table."""
        table = self._tables.get(name)
        return table.singular if table else None

    def table_name_for_singular(self, singular: str) -> Optional[str]:
        """
        Reverse lookup from a singular label to its table name.

        Returns the first table in declaration order whose singular matches,
        or None if no table has that label.
        """
        for table_name, table in self._tables.items():
            if table.singular == singular:
                return table_name
        return None

    def require_table_for_singular(self, singular: str) -> str:
        """Like table_name_for_singular, but a miss is a data-integrity error."""
        table_name = self.table_name_for_singular(singular)
        if table_name is None:
            raise UnresolvedSingularError(singular)
        return table_name

    def has_singular(self, singular: str) -> bool:
        return self.table_name_for_singular(singular) is not None

    def all_tables(self) -> List[Tuple[str, TableSpec]]:
        """Return (name, table) pairs in declaration order."""
        return list(self._tables.items())

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)
