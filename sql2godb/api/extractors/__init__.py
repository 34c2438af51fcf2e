"""Type extraction utilities."""

from .type_mapper import (
    SQL_TO_GO_TYPES,
    map_to_go_type,
    go_field_type,
    go_type_imports,
    strip_trailing_comma,
)

__all__ = [
    "SQL_TO_GO_TYPES",
    "map_to_go_type",
    "go_field_type",
    "go_type_imports",
    "strip_trailing_comma",
]
