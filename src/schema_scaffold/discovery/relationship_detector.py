"""
Relationship Detector - Proposes forward relationships from column names.

A column is treated as a foreign key when it is an integer named
``<singular>_id`` and a table named ``<singular>s`` exists. Columns on pivot
tables produce belongsToMany relationships; all others produce belongsTo.
"""

from __future__ import annotations

import logging
from typing import Optional

from schema_scaffold.discovery.pivot import SEPARATOR, PivotClassifier
from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.models import ColumnSpec, Relationship, RelationshipKind, RelationshipSet

logger = logging.getLogger(__name__)

FK_COLUMN_TYPE = "integer"
FK_SUFFIX = "id"
REFERENCED_KEY = "id"


class RelationshipDetector:
    """
    Scans every integer column of every table for foreign-key names.

    Detection is a pure function of the schema: running it twice over the
    same index yields equal relationship sets.
    """

    def __init__(self, schema_index: SchemaIndex, pivot_classifier: Optional[PivotClassifier] = None):
        """
        Initialize the detector.

        Args:
            schema_index: Index over the declared tables
            pivot_classifier: Optional classifier (built from the index if omitted)
        """
        self.schema_index = schema_index
        self.pivot_classifier = pivot_classifier or PivotClassifier(schema_index)

    def detect(self) -> RelationshipSet:
        """
        Build the draft relationship set.

        Returns:
            RelationshipSet holding forward belongsTo/belongsToMany entries,
            in table and column declaration order
        """
        relationships = RelationshipSet()

        for table_name, table in self.schema_index.all_tables():
            # Resolved lazily: only tables holding a foreign key are classified
            is_pivot: Optional[bool] = None

            for column in table.columns:
                referenced = self.referenced_table(column)
                if referenced is None:
                    continue

                if is_pivot is None:
                    is_pivot = self.pivot_classifier.is_pivot_table(table_name)

                kind = RelationshipKind.BELONGS_TO_MANY if is_pivot else RelationshipKind.BELONGS_TO
                relationships.add(
                    table_name,
                    Relationship(
                        foreign_column=column.name,
                        referenced_key=REFERENCED_KEY,
                        on=referenced,
                        kind=kind,
                    ),
                )
                logger.debug(f"{table_name}.{column.name} -> {referenced}.{REFERENCED_KEY} ({kind.value})")

        logger.info(
            f"Detected {len(relationships)} relationships across "
            f"{len(relationships.tables())} of {len(self.schema_index)} tables"
        )
        return relationships

    def referenced_table(self, column: ColumnSpec) -> Optional[str]:
        """
        Resolve the table a column refers to, if it follows the FK convention.

        Unnamed, non-integer and non ``_id`` columns, and names whose
        pluralized prefix is not a known table, all return None.
        """
        if not column.name:
            return None
        if column.type != FK_COLUMN_TYPE or SEPARATOR not in column.name:
            return None

        parts = column.name.split(SEPARATOR)
        if parts.pop() != FK_SUFFIX:
            return None

        # Only "+s" pluralization is recognized
        candidate = SEPARATOR.join(parts) + "s"
        if candidate not in self.schema_index:
            return None
        return candidate


def detect_relationships(schema_index: SchemaIndex) -> RelationshipSet:
    """Convenience function to run detection over an index."""
    return RelationshipDetector(schema_index).detect()
