"""
Relationship inference module.

Detects foreign-key columns and pivot tables in a declared schema, confirms
ambiguous one-to-many guesses, and synthesizes inverse relationships.

Usage:
    from schema_scaffold.discovery import infer_relationships

    relationships = infer_relationships(tables)
"""

from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.discovery.pivot import PivotClassifier, pivot_parts
from schema_scaffold.discovery.relationship_detector import RelationshipDetector, detect_relationships
from schema_scaffold.discovery.disambiguation import (
    ClickDecisionSource,
    DecisionSource,
    DefaultDecisionSource,
    Disambiguator,
    ScriptedDecisionSource,
    resolve_relationships,
)
from schema_scaffold.discovery.inverse import InverseSynthesizer, synthesize_inverses
from schema_scaffold.discovery.pipeline import InferencePipeline, infer_relationships

__all__ = [
    "SchemaIndex",
    "PivotClassifier",
    "pivot_parts",
    "RelationshipDetector",
    "detect_relationships",
    "DecisionSource",
    "ClickDecisionSource",
    "DefaultDecisionSource",
    "ScriptedDecisionSource",
    "Disambiguator",
    "resolve_relationships",
    "InverseSynthesizer",
    "synthesize_inverses",
    "InferencePipeline",
    "infer_relationships",
]
