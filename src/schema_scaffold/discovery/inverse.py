"""
Inverse Synthesizer - Attaches the complementary side of every relationship.
"""

from __future__ import annotations

import logging
from typing import Optional

from schema_scaffold.discovery.pivot import pivot_parts
from schema_scaffold.discovery.relationship_detector import REFERENCED_KEY
from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.models import Relationship, RelationshipKind, RelationshipSet

logger = logging.getLogger(__name__)


class InverseSynthesizer:
    """
    Derives inverse relationships for the referenced side of each edge.

    - belongsTo on T -> ``pending_inverse_kind`` (default hasMany) on ``on``, pointing at T
    - belongsToMany on pivot T -> belongsToMany on ``on``, pointing at the
      other table of the pivot
    - hasOne/hasMany -> nothing

    Only the entries present before synthesis are examined; inverses
    appended during the pass are never expanded themselves.
    """

    def __init__(self, schema_index: SchemaIndex):
        self.schema_index = schema_index

    def synthesize(self, relationships: RelationshipSet) -> RelationshipSet:
        """
        Expand a resolved relationship set with inverse entries.

        Args:
            relationships: Set produced by disambiguation (left unchanged)

        Returns:
            New, frozen RelationshipSet with forward and inverse entries

        Raises:
            UnresolvedSingularError: if a pivot half does not name a table
        """
        expanded = relationships.copy()
        added = 0

        for table_name, rel in relationships.pairs():
            inverse = self._inverse_of(table_name, rel)
            if inverse is None:
                continue
            expanded.add(rel.on, inverse)
            added += 1
            logger.debug(f"{rel.on} -> {inverse.on} ({inverse.kind.value}) inverse of {table_name}")

        logger.info(f"Synthesized {added} inverse relationships")
        return expanded.freeze()

    def _inverse_of(self, table_name: str, rel: Relationship) -> Optional[Relationship]:
        if rel.kind == RelationshipKind.BELONGS_TO:
            return Relationship(
                referenced_key=REFERENCED_KEY,
                on=table_name,
                kind=rel.pending_inverse_kind or RelationshipKind.HAS_MANY,
            )

        if rel.kind == RelationshipKind.BELONGS_TO_MANY:
            first, second = pivot_parts(table_name)
            first_table = self.schema_index.require_table_for_singular(first)
            second_table = self.schema_index.require_table_for_singular(second)
            target = second_table if rel.on == first_table else first_table
            return Relationship(
                referenced_key=REFERENCED_KEY,
                on=target,
                kind=RelationshipKind.BELONGS_TO_MANY,
            )

        return None


def synthesize_inverses(relationships: RelationshipSet, schema_index: SchemaIndex) -> RelationshipSet:
    """Convenience function to add inverse relationships."""
    return InverseSynthesizer(schema_index).synthesize(relationships)
