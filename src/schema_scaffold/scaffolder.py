"""
Scaffolder - load a schema, infer relationships, emit and write artifacts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from schema_scaffold.config import ScaffoldConfig
from schema_scaffold.discovery import DecisionSource, DefaultDecisionSource, InferencePipeline
from schema_scaffold.metadata import load_schema
from schema_scaffold.models import RelationshipSet, TableSpec
from schema_scaffold.output import ArtifactWriter, MigrationEmitter, ModelEmitter

logger = logging.getLogger(__name__)


@dataclass
class ScaffoldResult:
    """Everything a scaffold run produced."""
    tables: Dict[str, TableSpec]
    relationships: RelationshipSet
    migrations: Dict[str, str] = field(default_factory=dict)
    models: Dict[str, str] = field(default_factory=dict)
    written: Dict[str, List[Path]] = field(default_factory=dict)


class Scaffolder:
    """
    Runs a full scaffold.

    The same decision source answers relationship questions and overwrite
    questions, in that order.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        decision_source: Optional[DecisionSource] = None,
    ):
        self.config = config
        self.decision_source = decision_source or DefaultDecisionSource()

    def run(self, tables: Optional[Dict[str, TableSpec]] = None, write: bool = True) -> ScaffoldResult:
        """
        Scaffold migrations and models.

        Args:
            tables: Pre-loaded tables (read from config.schema_path if omitted)
            write: Whether to write files, or only render them

        Returns:
            ScaffoldResult with rendered sources and written paths

        Raises:
            ScaffoldError: on invalid schemas or ambiguous names; nothing is
                written in that case
        """
        if tables is None:
            tables = load_schema(self.config.schema_path)

        pipeline = InferencePipeline(tables, self.decision_source)
        relationships = pipeline.run()

        migrations = MigrationEmitter().render_all(tables, relationships, self.config.timestamp)
        models = ModelEmitter(
            pipeline.schema_index,
            namespace=self.config.model_namespace,
            pivot_classifier=pipeline.pivot_classifier,
        ).render_all(tables, relationships)

        result = ScaffoldResult(
            tables=tables,
            relationships=relationships,
            migrations=migrations,
            models=models,
        )

        if write:
            writer = ArtifactWriter(self.config, self.decision_source)
            result.written = writer.write(migrations, models)
            logger.info(
                f"Scaffold complete: {sum(len(p) for p in result.written.values())} files written"
            )

        return result
