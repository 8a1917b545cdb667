"""
Disambiguation Protocol - Confirms each detected one-to-many relationship.

A belongsTo guess may really be one-to-one. For each one the decision source
is asked up to two questions:

1. Does the owning table belong to the referenced table (one to many)?
   Yes keeps belongsTo, and the inverse defaults to hasMany.
2. Otherwise, does the owner have one of the referenced entity?
   Yes reads this side as hasOne, with the foreign key left in place.
   No keeps belongsTo but records that the inverse should be hasOne.

belongsToMany relationships are never revisited.
"""

from __future__ import annotations

import dataclasses
import logging
from collections import deque
from typing import Deque, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

import click

from schema_scaffold.discovery.schema_index import SchemaIndex
from schema_scaffold.models import Relationship, RelationshipKind, RelationshipSet
from schema_scaffold.utils import ucfirst

logger = logging.getLogger(__name__)


class DecisionSource(Protocol):
    """Anything that can answer a yes/no question."""

    def confirm(self, prompt: str, default: bool) -> bool:
        ...


class ClickDecisionSource:
    """Interactive decision source that prompts on the terminal."""

    def confirm(self, prompt: str, default: bool) -> bool:
        return click.confirm(prompt, default=default)


class DefaultDecisionSource:
    """Non-interactive decision source that always takes the default."""

    def confirm(self, prompt: str, default: bool) -> bool:
        logger.debug(f"{prompt} -> {default} (default)")
        return default


class ScriptedDecisionSource:
    """
    Deterministic decision source for tests and unattended runs.

    Answers are either a sequence consumed in order or a mapping of prompt
    text to answer. Prompts with no scripted answer fall back to the default.
    Every question asked is recorded in ``asked``.
    """

    def __init__(self, answers: Union[Sequence[bool], Mapping[str, bool]]):
        self._by_prompt: Optional[Mapping[str, bool]] = None
        self._queue: Deque[bool] = deque()
        if isinstance(answers, Mapping):
            self._by_prompt = dict(answers)
        else:
            self._queue.extend(bool(a) for a in answers)
        self.asked: List[Tuple[str, bool]] = []

    def confirm(self, prompt: str, default: bool) -> bool:
        if self._by_prompt is not None:
            answer = bool(self._by_prompt.get(prompt, default))
        elif self._queue:
            answer = self._queue.popleft()
        else:
            logger.warning(f"No scripted answer left for '{prompt}', using default {default}")
            answer = default
        self.asked.append((prompt, answer))
        return answer

    @property
    def remaining(self) -> int:
        return len(self._queue)


class Disambiguator:
    """Runs the confirmation exchange over a draft relationship set."""

    def __init__(self, schema_index: SchemaIndex, decision_source: DecisionSource):
        self.schema_index = schema_index
        self.decision_source = decision_source

    def resolve(self, relationships: RelationshipSet) -> RelationshipSet:
        """
        Confirm every belongsTo relationship with the decision source.

        Args:
            relationships: Draft set produced by detection

        Returns:
            New RelationshipSet with reclassified entries, same order
        """
        resolved = RelationshipSet()
        logger.info("Please confirm the following relationship types:")

        for table_name, rel in relationships.pairs():
            if rel.kind == RelationshipKind.BELONGS_TO:
                rel = self._confirm(table_name, rel)
            resolved.add(table_name, rel)

        return resolved

    def _confirm(self, table_name: str, rel: Relationship) -> Relationship:
        """Ask the one-to-many / one-to-one questions for a single relationship."""
        prompt = f"{ucfirst(table_name)} belong to {ucfirst(rel.on)} (one to many)"
        if self.decision_source.confirm(prompt, True):
            return rel

        singular_self = self.schema_index.singular_of(table_name)
        singular_foreign = self.schema_index.singular_of(rel.on)

        prompt = f"Ok, so does a {singular_self} have one {singular_foreign}? (one to one)"
        if self.decision_source.confirm(prompt, False):
            logger.debug(f"{table_name} -> {rel.on} reclassified as hasOne")
            return dataclasses.replace(rel, kind=RelationshipKind.HAS_ONE)

        logger.info(
            f"Got it, so a {singular_foreign} has one {singular_self}. "
            "(one to one the other way round)"
        )
        return dataclasses.replace(rel, pending_inverse_kind=RelationshipKind.HAS_ONE)


def resolve_relationships(
    relationships: RelationshipSet,
    schema_index: SchemaIndex,
    decision_source: DecisionSource,
) -> RelationshipSet:
    """Convenience function to disambiguate a draft set."""
    return Disambiguator(schema_index, decision_source).resolve(relationships)
