"""
Line-oriented finite-state parser for the CREATE TABLE subset.

The parser is a single pure function, `transition(state, line)`, returning the
next state and the table completed by that line (if any). Driving it over a
whole input and recovering from errors is the job of `iter_blocks` in
`sql2godb.language`.

Phases:
    IDLE      outside any CREATE ... ); block
    IN_TABLE  collecting columns for `state.table`
    SKIPPING  inside a block that already failed; waits for its `);`
"""

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from sql2godb.exceptions import DDLSyntaxError, Sql2GoDBError
from sql2godb.lib.table import Column, Table

CREATE_PREFIX = "CREATE"
CLOSE_PREFIX = ");"
COMMENT_PREFIX = "--"
CONSTRAINT_PREFIXES = ("PRIMARY KEY", "UNIQUE")
NOT_NULL_MARKERS = ("NOT NULL", "PRIMARY KEY")


class Phase(Enum):
    IDLE = "idle"
    IN_TABLE = "in_table"
    SKIPPING = "skipping"


class ParseState(NamedTuple):
    phase: Phase = Phase.IDLE
    table: Optional[Table] = None
    error: Optional[Sql2GoDBError] = None


INITIAL_STATE = ParseState()


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CREATE = "create"
    CONSTRAINT = "constraint"
    CLOSE = "close"
    COLUMN = "column"


def classify_line(line: str) -> LineKind:
    stripped = line.lstrip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if line.startswith(CREATE_PREFIX):
        return LineKind.CREATE
    if stripped.startswith(CONSTRAINT_PREFIXES):
        return LineKind.CONSTRAINT
    if line.startswith(CLOSE_PREFIX):
        return LineKind.CLOSE
    return LineKind.COLUMN


def parse_table_open(line: str, lineno: Optional[int] = None) -> Table:
    """`CREATE TABLE users (` -> empty Table("users"). The name is the second-to-last word."""
    words = line.split()
    if len(words) < 2:
        raise DDLSyntaxError(f"cannot find a table name in '{line.strip()}'", line=lineno)
    return Table(words[-2], lineno=lineno)


def parse_column(line: str, lineno: Optional[int] = None) -> Column:
    """`  email text NOT NULL,` -> Column("email", "text", not_null=True)."""
    words = line.strip().split()
    if len(words) < 2:
        raise DDLSyntaxError(f"column declaration needs a name and a type: '{line.strip()}'", line=lineno)
    not_null = any(marker in line for marker in NOT_NULL_MARKERS)
    return Column(words[0], words[1], not_null=not_null, lineno=lineno)


def transition(state: ParseState, line: str, lineno: Optional[int] = None) -> Tuple[ParseState, Optional[Table]]:
    """
    Advance the parser by one line.

    Returns (new_state, completed_table). `completed_table` is set only when the
    line closes an IN_TABLE block.

    Raises:
        DDLSyntaxError: malformed CREATE or column line, or a column line
            outside any table. The state passed in is left untouched.
    """
    kind = classify_line(line)

    if kind in (LineKind.BLANK, LineKind.COMMENT, LineKind.CONSTRAINT):
        return state, None

    if kind is LineKind.CREATE:
        # A table still in progress is dropped without complaint.
        return ParseState(Phase.IN_TABLE, parse_table_open(line, lineno)), None

    if kind is LineKind.CLOSE:
        if state.phase is Phase.IN_TABLE:
            return INITIAL_STATE, state.table
        return INITIAL_STATE, None

    # LineKind.COLUMN
    if state.phase is Phase.SKIPPING:
        return state, None
    if state.phase is Phase.IDLE:
        raise DDLSyntaxError(f"column declaration outside CREATE TABLE: '{line.strip()}'", line=lineno)

    column = parse_column(line, lineno)
    table = state.table
    grown = Table(table.table_name, table.columns + [column], lineno=table.lineno)
    return ParseState(Phase.IN_TABLE, grown), None
