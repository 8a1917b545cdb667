"""
Shared helpers.
"""

from schema_scaffold.utils.naming import class_name, studly, ucfirst

__all__ = [
    "class_name",
    "studly",
    "ucfirst",
]
