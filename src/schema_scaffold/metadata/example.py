"""
Sample schema written by ``scaffold init`` to get a new project started.

Covers every relationship shape the inference engine handles: a one-to-one
candidate (profiles), a one-to-many (posts) and a pivot table (role_user).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

EXAMPLE_SCHEMA: Dict[str, Dict[str, Any]] = {
    "users": {
        "singular": "user",
        "columns": [
            {"name": "id", "type": "increments"},
            {"name": "name", "type": "string"},
            {"name": "email", "type": "string", "modifiers": {"unique": ""}},
            {"name": "password", "type": "string"},
            {"type": "rememberToken"},
            {"type": "timestamps"},
            {"type": "softDeletes"},
        ],
    },
    "profiles": {
        "singular": "profile",
        "columns": [
            {"name": "id", "type": "increments"},
            {"name": "user_id", "type": "integer", "modifiers": {"unsigned": ""}},
            {"name": "phone", "type": "string", "arguments": [30]},
            {"name": "gender", "type": "string", "arguments": [1]},
        ],
        "indexes": [
            {"type": "unique", "columns": "phone"},
        ],
    },
    "posts": {
        "singular": "post",
        "columns": [
            {"name": "id", "type": "increments"},
            {"name": "type", "type": "string"},
            {"name": "user_id", "type": "integer", "modifiers": {"unsigned": ""}},
            {"name": "amount", "type": "float", "arguments": [8, 2]},
            {"type": "timestamps"},
            {"type": "softDeletes"},
        ],
    },
    "roles": {
        "singular": "role",
        "columns": [
            {"name": "id", "type": "increments"},
            {"name": "name", "type": "string"},
        ],
    },
    "role_user": {
        "singular": "role_user",
        "columns": [
            {"name": "role_id", "type": "integer", "modifiers": {"unsigned": ""}},
            {"name": "user_id", "type": "integer", "modifiers": {"unsigned": ""}},
        ],
    },
}


def write_example_schema(path: Path) -> Path:
    """Write the sample schema as YAML, preserving table order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(EXAMPLE_SCHEMA, f, default_flow_style=False, sort_keys=False)
    return path
