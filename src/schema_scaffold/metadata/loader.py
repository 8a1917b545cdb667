"""
Schema loader - reads and validates the declarative schema description.

The schema is a YAML mapping of table name to table definition:

    users:
      singular: user
      columns:
        - {name: id, type: increments}
        - {name: email, type: string, modifiers: {unique: ""}}
        - {type: timestamps}
      indexes:
        - {type: unique, columns: email}

Table order in the file is declaration order for everything downstream.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from schema_scaffold.exceptions import SchemaValidationError
from schema_scaffold.metadata.column_types import get_arity
from schema_scaffold.models import TableSpec

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Validates raw schema data and builds TableSpec objects."""

    def load(self, path: Path) -> Dict[str, TableSpec]:
        """
        Load a schema from a YAML file.

        Args:
            path: Path to the schema YAML

        Returns:
            Dict of table_name -> TableSpec in declaration order

        Raises:
            SchemaValidationError: if the file is missing or invalid
        """
        path = Path(path)
        if not path.exists():
            raise SchemaValidationError(f"Schema file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f)

        tables = self.from_dict(data)
        logger.info(f"Loaded {len(tables)} tables from {path}")
        return tables

    def from_dict(self, data: Any) -> Dict[str, TableSpec]:
        """Validate a raw mapping and convert it to TableSpec objects."""
        self.validate(data)
        return {str(name): TableSpec.from_dict(str(name), table) for name, table in data.items()}

    def validate(self, data: Any) -> None:
        """
        Check the raw schema for structural problems.

        Raises:
            SchemaValidationError: on the first problem found
        """
        if not isinstance(data, dict):
            raise SchemaValidationError("The schema must be a mapping of table name to table definition")

        for table_name, table_data in data.items():
            if not table_name:
                raise SchemaValidationError("Cannot have empty table name")
            if not isinstance(table_data, dict):
                raise SchemaValidationError(f"Table {table_name} must be a mapping")

            if not table_data.get("singular"):
                raise SchemaValidationError(f"Table {table_name} is missing the singular property")
            if not isinstance(table_data["singular"], str):
                raise SchemaValidationError(f"Table {table_name} has a singular property that is not a string")

            columns = table_data.get("columns")
            if not columns:
                raise SchemaValidationError(f"Table {table_name} is missing any columns")

            for column in columns:
                self._validate_column(table_name, column)

            for index in table_data.get("indexes") or []:
                self._validate_index(table_name, index)

    def _validate_column(self, table_name: str, column: Any) -> None:
        if not isinstance(column, dict):
            raise SchemaValidationError(f"A column in {table_name} must be a mapping")

        column_type = column.get("type")
        if not column_type:
            raise SchemaValidationError(f"A column in {table_name} is missing the type property.")

        arity = get_arity(column_type)
        if arity is None:
            raise SchemaValidationError(f"A column in {table_name} has the invalid type of {column_type}")
        required, optional = arity

        name = column.get("name")
        if required > 0 and not name:
            raise SchemaValidationError(
                f"A column in {table_name} of type {column_type} is missing the required name property."
            )
        if name and not isinstance(name, str):
            raise SchemaValidationError(
                f"A column in {table_name} of type {column_type} has the name {name!r}, which is not a string."
            )

        provided = (1 if name else 0) + _count_arguments(column.get("arguments"))
        if provided > required + optional:
            if name:
                msg = f"The field {name} in the table {table_name} has too many arguments."
            else:
                msg = f"A field in the {table_name} table of type {column_type} has too many arguments."
            # The column name is the first argument, so it is not counted here
            accepted = required + optional - 1
            raise SchemaValidationError(f"{msg} {column_type} only accepts {accepted} arguments.")

    def _validate_index(self, table_name: str, index: Any) -> None:
        if not isinstance(index, dict) or not index.get("type"):
            raise SchemaValidationError(f"Table {table_name} has an index without a type.")
        if not index.get("columns"):
            raise SchemaValidationError(f"Table {table_name} has an index without any columns.")
        if not isinstance(index["columns"], (str, list)):
            raise SchemaValidationError(
                f"Table {table_name} has an index where the columns are not an array or a string."
            )


def _count_arguments(arguments: Any) -> int:
    if not arguments:
        return 0
    if isinstance(arguments, list):
        return len(arguments)
    return 1


def load_schema(path: Path) -> Dict[str, TableSpec]:
    """Convenience function to load and validate a schema file."""
    return SchemaLoader().load(path)


def schema_from_dict(data: Dict[str, Any]) -> Dict[str, TableSpec]:
    """Convenience function to validate an in-memory schema."""
    return SchemaLoader().from_dict(data)