"""
Output module for rendering and writing scaffold artifacts.

Supports:
- Laravel migrations (columns, indexes, foreign keys)
- Eloquent models (fillable fields, soft deletes, relationship accessors)
"""

from schema_scaffold.output.migration import MigrationEmitter, migration_filename
from schema_scaffold.output.model import ModelEmitter, model_filename
from schema_scaffold.output.writer import ArtifactWriter

__all__ = [
    "MigrationEmitter",
    "migration_filename",
    "ModelEmitter",
    "model_filename",
    "ArtifactWriter",
]
