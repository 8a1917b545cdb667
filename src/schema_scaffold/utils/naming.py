"""Name casing helpers shared by prompts and emitters."""

from __future__ import annotations


def ucfirst(value: str) -> str:
    """Uppercase the first character only: ``role_user`` -> ``Role_user``."""
    return value[:1].upper() + value[1:]


def studly(value: str) -> str:
    """Convert snake case to StudlyCase: ``role_user`` -> ``RoleUser``."""
    return "".join(part[:1].upper() + part[1:] for part in value.split("_") if part)


def class_name(singular: str) -> str:
    """Model class name for a singular label: ``USER`` -> ``User``."""
    return ucfirst(singular.lower())
