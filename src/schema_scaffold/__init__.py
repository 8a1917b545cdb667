"""
Schema Scaffold - Migrations and models from a declarative schema

Reads a table/column description and generates Laravel migrations and
Eloquent models, inferring the relationships between tables.

Features:
- Foreign-key detection from integer <singular>_id columns
- Pivot table classification for many-to-many relationships
- Interactive or scripted one-to-one disambiguation
- Inverse relationship synthesis on the referenced side
"""

__version__ = "0.1.0"

from schema_scaffold.exceptions import (
    AmbiguousNamingError,
    FrozenRelationshipSetError,
    ScaffoldError,
    SchemaValidationError,
    UnresolvedSingularError,
)
from schema_scaffold.models import (
    ColumnSpec,
    IndexSpec,
    Relationship,
    RelationshipKind,
    RelationshipSet,
    TableSpec,
)
from schema_scaffold.config import ScaffoldConfig

from schema_scaffold.discovery import (
    ClickDecisionSource,
    DefaultDecisionSource,
    InferencePipeline,
    ScriptedDecisionSource,
    infer_relationships,
)

from schema_scaffold.metadata import load_schema, schema_from_dict

from schema_scaffold.scaffolder import Scaffolder, ScaffoldResult

__all__ = [
    # Errors
    "ScaffoldError",
    "SchemaValidationError",
    "AmbiguousNamingError",
    "UnresolvedSingularError",
    "FrozenRelationshipSetError",
    # Core models
    "ColumnSpec",
    "IndexSpec",
    "TableSpec",
    "Relationship",
    "RelationshipKind",
    "RelationshipSet",
    "ScaffoldConfig",
    # Inference
    "InferencePipeline",
    "infer_relationships",
    "ClickDecisionSource",
    "DefaultDecisionSource",
    "ScriptedDecisionSource",
    # Loading and scaffolding
    "load_schema",
    "schema_from_dict",
    "Scaffolder",
    "ScaffoldResult",
]
