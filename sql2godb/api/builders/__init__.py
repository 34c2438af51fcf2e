"""SQL statement builders for generated functions."""

from .statement_builders import (
    build_insert,
    build_select_by_id,
    build_update,
    build_delete_by_id,
)

__all__ = [
    "build_insert",
    "build_select_by_id",
    "build_update",
    "build_delete_by_id",
]
