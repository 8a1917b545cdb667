"""
Artifact Writer - Writes rendered migrations and models to the project.

Output Structure:
    <base_path>/
    ├── database/migrations/
    │   ├── 2024_01_01_120000_create_users_table.php
    │   └── ...
    └── app/<model namespace>/
        ├── User.php
        └── ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from schema_scaffold.config import ScaffoldConfig
from schema_scaffold.discovery.disambiguation import DecisionSource, DefaultDecisionSource
from schema_scaffold.utils import ucfirst

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """
    Writes artifacts, asking before an existing file is overwritten.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        decision_source: Optional[DecisionSource] = None,
    ):
        """
        Initialize the writer.

        Args:
            config: Scaffold configuration (target directories, what to create)
            decision_source: Answers overwrite questions (defaults to never overwriting)
        """
        self.config = config
        self.decision_source = decision_source or DefaultDecisionSource()

    def write(
        self,
        migrations: Dict[str, str],
        models: Dict[str, str],
    ) -> Dict[str, List[Path]]:
        """
        Write all enabled artifact kinds.

        Args:
            migrations: Dict of filename -> migration source
            models: Dict of filename -> model source

        Returns:
            Dict of kind ("migration", "model") -> written paths
        """
        written: Dict[str, List[Path]] = {}

        if self.config.create_migrations:
            written["migration"] = self._write_all(self.config.migration_path, migrations, "migration")
        if self.config.create_models:
            written["model"] = self._write_all(self.config.model_path, models, "model")

        return written

    def _write_all(self, directory: Path, files: Dict[str, str], kind: str) -> List[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        for filename, contents in files.items():
            path = self.write_file(directory / filename, contents, kind)
            if path is not None:
                paths.append(path)
        return paths

    def write_file(self, path: Path, contents: str, kind: str) -> Optional[Path]:
        """
        Write a single file.

        Returns:
            The path written, or None if contents were empty or the user
            declined to overwrite an existing file
        """
        if not contents:
            return None

        if path.exists():
            prompt = f"{ucfirst(kind)} {path} already exists. Overwrite?"
            if not self.decision_source.confirm(prompt, False):
                logger.info(f"Kept existing {kind} {path}")
                return None

        path.write_text(contents)
        logger.info(f"Wrote file {path}")
        return path
