"""
Inference Pipeline - Runs relationship inference end to end.

Stages, each returning a new RelationshipSet:
1. Detection of forward relationships from foreign-key column names
2. Disambiguation of one-to-many guesses through a decision source
3. Synthesis of inverse relationships (the result is frozen)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from schema_scaffold.discovery.disambiguation import (
    DecisionSource,
    DefaultDecisionSource,
    Disambiguator,
)
from schema_scaffold.discovery.inverse import InverseSynthesizer
from schema_scaffold.discovery.pivot import PivotClassifier
from schema_scaffold.discovery.relationship_detector import RelationshipDetector
from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.models import RelationshipSet, TableSpec

logger = logging.getLogger(__name__)


class InferencePipeline:
    """
    Runs detection, disambiguation and inverse synthesis over one schema.

    Usage:
        pipeline = InferencePipeline(tables, ClickDecisionSource())
        relationships = pipeline.run()
    """

    def __init__(
        self,
        tables: Union[Dict[str, TableSpec], SchemaIndex],
        decision_source: Optional[DecisionSource] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            tables: Validated table definitions, or an existing SchemaIndex
            decision_source: Answers disambiguation questions
                (defaults to always accepting the default answer)
        """
        self.schema_index = tables if isinstance(tables, SchemaIndex) else SchemaIndex(tables)
        self.decision_source = decision_source or DefaultDecisionSource()
        self.pivot_classifier = PivotClassifier(self.schema_index)

    def detect(self) -> RelationshipSet:
        """Stage 1: draft forward relationships."""
        return RelationshipDetector(self.schema_index, self.pivot_classifier).detect()

    def resolve(self, relationships: RelationshipSet) -> RelationshipSet:
        """Stage 2: confirm belongsTo relationships."""
        return Disambiguator(self.schema_index, self.decision_source).resolve(relationships)

    def synthesize(self, relationships: RelationshipSet) -> RelationshipSet:
        """Stage 3: add inverse relationships and freeze."""
        return InverseSynthesizer(self.schema_index).synthesize(relationships)

    def run(self) -> RelationshipSet:
        """
        Run all stages.

        Returns:
            Frozen RelationshipSet holding forward and inverse relationships

        Raises:
            AmbiguousNamingError: a foreign-key holding table has more than one underscore
            UnresolvedSingularError: a pivot half names no table
        """
        logger.info(f"Inferring relationships for {len(self.schema_index)} tables")

        detected = self.detect()
        resolved = self.resolve(detected)
        relationships = self.synthesize(resolved)

        logger.info(
            f"Inference complete: {len(relationships)} relationships on "
            f"{len(relationships.tables())} tables"
        )
        return relationships

    def is_pivot_table(self, table_name: str) -> bool:
        """Expose pivot classification to artifact emitters."""
        return self.pivot_classifier.is_pivot_table(table_name)


def infer_relationships(
    tables: Dict[str, TableSpec],
    decision_source: Optional[DecisionSource] = None,
) -> RelationshipSet:
    """
    Convenience function to infer the full relationship set.

    Args:
        tables: Dict of table_name -> TableSpec, in declaration order
        decision_source: Optional source of disambiguation answers

    Returns:
        Frozen RelationshipSet
    """
    return InferencePipeline(tables, decision_source).run()
