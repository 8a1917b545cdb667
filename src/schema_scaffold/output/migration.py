"""
Migration emitter - renders one Laravel migration per table.

Each migration creates the table's columns, then its indexes, then one
foreign key constraint per forward relationship owned by the table.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from schema_scaffold.models import ColumnSpec, IndexSpec, Relationship, RelationshipSet, TableSpec
from schema_scaffold.utils import studly

logger = logging.getLogger(__name__)

INDENT = " " * 12

MIGRATION_TEMPLATE = """<?php

use Illuminate\\Support\\Facades\\Schema;
use Illuminate\\Database\\Schema\\Blueprint;
use Illuminate\\Database\\Migrations\\Migration;

class {{Class}} extends Migration
{
    /**
     * Run the migrations.
     *
     * @return void
     */
    public function up()
    {
        Schema::create('{{table}}', function (Blueprint $table) {
{{columns}}{{indexes}}{{relationships}}        });
    }

    /**
     * Reverse the migrations.
     *
     * @return void
     */
    public function down()
    {
        Schema::dropIfExists('{{table}}');
    }
}
"""


def fill_template(template: str, values: Dict[str, str]) -> str:
    """Replace ``{{key}}`` placeholders with their values."""
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", value)
    return template


def render_value(value: Any) -> str:
    """Render a column argument or modifier argument as PHP source."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(f"'{item}'" for item in value) + "]"
    return str(value)


def migration_class(table_name: str) -> str:
    return f"Create{studly(table_name)}Table"


def migration_filename(table_name: str, timestamp: datetime) -> str:
    return f"{timestamp:%Y_%m_%d_%H%M%S}_create_{table_name.lower()}_table.php"


class MigrationEmitter:
    """Renders migration source for tables and their forward relationships."""

    def render(self, table: TableSpec, relationships: Optional[List[Relationship]] = None) -> str:
        """
        Render the migration for a single table.

        Args:
            table: Table to create
            relationships: Relationships owned by the table; only those with
                a foreign column produce constraints

        Returns:
            PHP source of the migration
        """
        relationships = relationships or []
        return fill_template(MIGRATION_TEMPLATE, {
            "Class": migration_class(table.name),
            "table": table.name.lower(),
            "columns": "".join(self.render_column(c) for c in table.columns),
            "indexes": "".join(self.render_index(i) for i in table.indexes),
            "relationships": "".join(
                self.render_foreign_key(r) for r in relationships if r.is_forward
            ),
        })

    def render_all(
        self,
        tables: Dict[str, TableSpec],
        relationships: RelationshipSet,
        timestamp: datetime,
    ) -> Dict[str, str]:
        """
        Render migrations for every table in declaration order.

        Filenames are stamped one second apart so the framework runs them in
        the order the tables were declared.

        Returns:
            Dict of filename -> migration source
        """
        migrations: Dict[str, str] = {}
        for position, (table_name, table) in enumerate(tables.items()):
            filename = migration_filename(table_name, timestamp + timedelta(seconds=position))
            migrations[filename] = self.render(table, relationships.for_table(table_name))
        logger.info(f"Rendered {len(migrations)} migrations")
        return migrations

    def render_column(self, column: ColumnSpec) -> str:
        args = [f"'{column.name}'"] if column.name else []
        args.extend(render_value(a) for a in column.arguments)

        line = f"{INDENT}$table->{column.type}({', '.join(args)})"
        for modifier, argument in column.modifiers.items():
            rendered = "" if argument in ("", None) else render_value(argument)
            line += f"->{modifier}({rendered})"
        return line + ";\n"

    def render_index(self, index: IndexSpec) -> str:
        if isinstance(index.columns, str):
            columns = f"'{index.columns}'"
        else:
            columns = render_value(index.columns)
        return f"{INDENT}$table->{index.type}({columns});\n"

    def render_foreign_key(self, relationship: Relationship) -> str:
        return (
            f"{INDENT}$table->foreign('{relationship.foreign_column}')"
            f"->references('{relationship.referenced_key}')"
            f"->on('{relationship.on}');\n"
        )
