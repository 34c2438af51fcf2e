"""DDL parser state machine."""

from .state_machine import (
    Phase,
    ParseState,
    LineKind,
    INITIAL_STATE,
    classify_line,
    parse_table_open,
    parse_column,
    transition,
)

__all__ = [
    "Phase",
    "ParseState",
    "LineKind",
    "INITIAL_STATE",
    "classify_line",
    "parse_table_open",
    "parse_column",
    "transition",
]
