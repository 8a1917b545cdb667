"""
Model emitter - renders one Eloquent model per non-pivot table.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from schema_scaffold.discovery.pivot import PivotClassifier
from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.models import Relationship, RelationshipKind, RelationshipSet, TableSpec
from schema_scaffold.output.migration import fill_template
from schema_scaffold.utils import class_name

logger = logging.getLogger(__name__)

MODEL_TEMPLATE = """<?php

namespace {{namespace}};

use Illuminate\\Database\\Eloquent\\Model;
{{imports}}
class {{Class}} extends Model
{
{{use}}    protected $table = '{{table}}';

    protected $fillable = [{{fillable}}];
{{relationships}}}
"""

RELATIONSHIP_TEMPLATE = """
    public function {{method}}()
    {
        return $this->{{kind}}('{{namespace}}\\{{Class}}');
    }
"""

# belongsTo/hasOne return a single model, so the accessor is singular
SINGULAR_ACCESSORS = (RelationshipKind.BELONGS_TO, RelationshipKind.HAS_ONE)


def model_filename(table: TableSpec) -> str:
    return f"{class_name(table.singular)}.php"


class ModelEmitter:
    """Renders model source with one accessor method per relationship."""

    def __init__(
        self,
        schema_index: SchemaIndex,
        namespace: str = "App",
        pivot_classifier: Optional[PivotClassifier] = None,
    ):
        self.schema_index = schema_index
        self.namespace = namespace
        self.pivot_classifier = pivot_classifier or PivotClassifier(schema_index)

    def render(self, table: TableSpec, relationships: Optional[List[Relationship]] = None) -> Optional[str]:
        """
        Render the model for a single table.

        Returns:
            PHP source of the model, or None for pivot tables

        Raises:
            AmbiguousNamingError: if the table name has more than one underscore
        """
        if self.pivot_classifier.is_pivot_table(table.name):
            logger.debug(f"Skipping model for pivot table {table.name}")
            return None

        soft_deletes = table.uses_soft_deletes
        return fill_template(MODEL_TEMPLATE, {
            "namespace": self.namespace,
            "imports": "use Illuminate\\Database\\Eloquent\\SoftDeletes;\n" if soft_deletes else "",
            "Class": class_name(table.singular),
            "use": "    use SoftDeletes;\n\n" if soft_deletes else "",
            "table": table.name.lower(),
            "fillable": ", ".join(f"'{name}'" for name in table.column_names),
            "relationships": "".join(self.render_relationship(r) for r in relationships or []),
        })

    def render_all(self, tables: Dict[str, TableSpec], relationships: RelationshipSet) -> Dict[str, str]:
        """
        Render models for every non-pivot table in declaration order.

        Returns:
            Dict of filename -> model source
        """
        models: Dict[str, str] = {}
        for table_name, table in tables.items():
            source = self.render(table, relationships.for_table(table_name))
            if source is not None:
                models[model_filename(table)] = source
        logger.info(f"Rendered {len(models)} models")
        return models

    def render_relationship(self, relationship: Relationship) -> str:
        singular_foreign = (self.schema_index.singular_of(relationship.on) or relationship.on).lower()
        if relationship.kind in SINGULAR_ACCESSORS:
            method = singular_foreign
        else:
            method = relationship.on

        return fill_template(RELATIONSHIP_TEMPLATE, {
            "method": method,
            "kind": relationship.kind.value,
            "namespace": self.namespace,
            "Class": class_name(singular_foreign),
        })
