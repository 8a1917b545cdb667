"""
Core data models for the schema_scaffold package.

Defines the table/column descriptions consumed by relationship inference and
the relationship values it produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from schema_scaffold.exceptions import FrozenRelationshipSetError


class RelationshipKind(str, Enum):
    """Eloquent relationship types."""
    BELONGS_TO = "belongsTo"
    BELONGS_TO_MANY = "belongsToMany"
    HAS_ONE = "hasOne"
    HAS_MANY = "hasMany"


@dataclass(frozen=True)
class ColumnSpec:
    """A single column declaration."""
    type: str
    name: Optional[str] = None
    arguments: List[Any] = field(default_factory=list)
    modifiers: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {"type": self.type}
        if self.name is not None:
            data["name"] = self.name
        if self.arguments:
            data["arguments"] = list(self.arguments)
        if self.modifiers:
            data["modifiers"] = dict(self.modifiers)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ColumnSpec:
        """Create from dictionary."""
        arguments = data.get("arguments") or []
        if not isinstance(arguments, list):
            # A single scalar argument is shorthand for a one-element list
            arguments = [arguments]
        return cls(
            type=data["type"],
            name=data.get("name") or None,
            arguments=arguments,
            modifiers=dict(data.get("modifiers") or {}),
        )


@dataclass(frozen=True)
class IndexSpec:
    """An index declaration on one or more columns."""
    type: str
    columns: Union[str, List[str]]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": self.type, "columns": self.columns}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> IndexSpec:
        """Create from dictionary."""
        return cls(type=data["type"], columns=data["columns"])


@dataclass(frozen=True)
class TableSpec:
    """A declared table: plural name, singular label and ordered columns."""
    name: str
    singular: str
    columns: List[ColumnSpec] = field(default_factory=list)
    indexes: List[IndexSpec] = field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        """Return names of the named columns, in declaration order."""
        return [c.name for c in self.columns if c.name]

    @property
    def uses_soft_deletes(self) -> bool:
        return any(c.type == "softDeletes" for c in self.columns)

    def get_column(self, name: str) -> Optional[ColumnSpec]:
        """Get column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {
            "singular": self.singular,
            "columns": [c.to_dict() for c in self.columns],
        }
        if self.indexes:
            data["indexes"] = [i.to_dict() for i in self.indexes]
        return data

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> TableSpec:
        """Create from a table definition keyed by ``name``."""
        return cls(
            name=name,
            singular=data["singular"],
            columns=[ColumnSpec.from_dict(c) for c in data.get("columns", [])],
            indexes=[IndexSpec.from_dict(i) for i in data.get("indexes") or []],
        )


@dataclass(frozen=True)
class Relationship:
    """
    A directional edge from the owning table to the table named by ``on``.

    Forward edges carry the ``foreign_column`` holding the reference; inverse
    edges are derived and leave it unset.
    """
    on: str
    kind: RelationshipKind
    foreign_column: Optional[str] = None
    referenced_key: str = "id"
    pending_inverse_kind: Optional[RelationshipKind] = None

    @property
    def is_forward(self) -> bool:
        return self.foreign_column is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {
            "references": self.referenced_key,
            "on": self.on,
            "type": self.kind.value,
        }
        if self.foreign_column is not None:
            data["foreign"] = self.foreign_column
        if self.pending_inverse_kind is not None:
            data["inverse_type"] = self.pending_inverse_kind.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Relationship:
        """Create from dictionary."""
        inverse = data.get("inverse_type")
        return cls(
            on=data["on"],
            kind=RelationshipKind(data["type"]),
            foreign_column=data.get("foreign"),
            referenced_key=data.get("references", "id"),
            pending_inverse_kind=RelationshipKind(inverse) if inverse else None,
        )


@dataclass
class RelationshipSet:
    """
    Ordered mapping of table name -> relationships owned by that table.

    Table keys keep first-insertion order and each list keeps append order,
    so artifacts emitted from the set are deterministic. Once frozen, the set
    rejects further additions.
    """
    entries: Dict[str, List[Relationship]] = field(default_factory=dict)
    frozen: bool = False

    def add(self, table_name: str, relationship: Relationship) -> None:
        """Append a relationship to a table's list."""
        if self.frozen:
            raise FrozenRelationshipSetError(
                f"Cannot add relationship to '{table_name}': set is frozen"
            )
        self.entries.setdefault(table_name, []).append(relationship)

    def for_table(self, table_name: str) -> List[Relationship]:
        """Get the relationships owned by a table (empty if none)."""
        return list(self.entries.get(table_name, []))

    def tables(self) -> List[str]:
        """Return the owning table names in insertion order."""
        return list(self.entries.keys())

    def pairs(self) -> Iterator[Tuple[str, Relationship]]:
        """Iterate (table_name, relationship) over a snapshot of the set."""
        snapshot = [(t, list(rels)) for t, rels in self.entries.items()]
        for table_name, relationships in snapshot:
            for rel in relationships:
                yield table_name, rel

    def copy(self) -> RelationshipSet:
        """Return an unfrozen copy that can be extended independently."""
        return RelationshipSet(
            entries={t: list(rels) for t, rels in self.entries.items()},
        )

    def freeze(self) -> RelationshipSet:
        self.frozen = True
        return self

    def __len__(self) -> int:
        return sum(len(rels) for rels in self.entries.values())

    def __contains__(self, table_name: object) -> bool:
        return table_name in self.entries

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Convert to dictionary for serialization."""
        return {t: [r.to_dict() for r in rels] for t, rels in self.entries.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, List[Dict[str, Any]]]) -> RelationshipSet:
        """Create from dictionary."""
        return cls(
            entries={t: [Relationship.from_dict(r) for r in rels] for t, rels in data.items()},
        )
