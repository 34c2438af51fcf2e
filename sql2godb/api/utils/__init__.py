"""Utility functions for Go code generation."""

from .naming import to_upper_camel, singularize, entity_name, receiver_name
from .formatters import format_go_code

__all__ = [
    "to_upper_camel",
    "singularize",
    "entity_name",
    "receiver_name",
    "format_go_code",
]
