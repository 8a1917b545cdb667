"""
Run configuration for scaffolding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path("app") / "scaffold.yaml"
ROOT_NAMESPACE = "App"


@dataclass
class ScaffoldConfig:
    """Configuration for a scaffold run."""
    schema_path: Path = field(default_factory=lambda: DEFAULT_SCHEMA_PATH)
    base_path: Path = field(default_factory=lambda: Path("."))
    create_migrations: bool = True
    create_models: bool = True
    model_namespace: str = ROOT_NAMESPACE
    migrations_dir: Path = field(default_factory=lambda: Path("database") / "migrations")
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if isinstance(self.schema_path, str):
            self.schema_path = Path(self.schema_path)
        if isinstance(self.base_path, str):
            self.base_path = Path(self.base_path)
        if isinstance(self.migrations_dir, str):
            self.migrations_dir = Path(self.migrations_dir)
        # Namespaces are often typed with forward slashes
        self.model_namespace = self.model_namespace.replace("/", "\\").strip("\\ ")
        if self.timestamp is None:
            self.timestamp = datetime.now()

    @property
    def migration_path(self) -> Path:
        """Directory migrations are written to."""
        return self.base_path / self.migrations_dir

    @property
    def model_path(self) -> Path:
        """Directory models are written to, derived from the model namespace."""
        relative = self.model_namespace
        if relative == ROOT_NAMESPACE or relative.startswith(ROOT_NAMESPACE + "\\"):
            relative = relative[len(ROOT_NAMESPACE):]
        parts = [p for p in relative.split("\\") if p]
        return self.base_path.joinpath("app", *parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "schema_path": str(self.schema_path),
            "base_path": str(self.base_path),
            "create_migrations": self.create_migrations,
            "create_models": self.create_models,
            "model_namespace": self.model_namespace,
            "migrations_dir": str(self.migrations_dir),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ScaffoldConfig:
        """Create from dictionary; missing keys take their defaults."""
        defaults = cls()
        return cls(
            schema_path=data.get("schema_path", defaults.schema_path),
            base_path=data.get("base_path", defaults.base_path),
            create_migrations=data.get("create_migrations", defaults.create_migrations),
            create_models=data.get("create_models", defaults.create_models),
            model_namespace=data.get("model_namespace", defaults.model_namespace),
            migrations_dir=data.get("migrations_dir", defaults.migrations_dir),
        )

    @classmethod
    def load(cls, path: Path) -> ScaffoldConfig:
        """Load configuration from a YAML file."""
        path = Path(path)
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)
