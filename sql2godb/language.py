"""
Entry points for turning DDL text into Table models.

`iter_blocks` drives the parser state machine over a whole input and turns every
CREATE ... ); block into a BlockResult. The `build_tables*` helpers are the
strict variants: they return plain tables and raise on the first failure.
"""

from pathlib import Path
from typing import Iterator, List

from sql2godb.api.gen_logging import get_logger
from sql2godb.exceptions import DDLSyntaxError
from sql2godb.lib.results import BlockResult
from sql2godb.lib.table import Table
from sql2godb.parser import (
    INITIAL_STATE,
    LineKind,
    ParseState,
    Phase,
    classify_line,
    transition,
)

logger = get_logger(__name__)


# ------------------------------------------------------------------------------
# Public model builders

def build_tables(ddl_path: str) -> List[Table]:
    """Parse every table from a UTF-8 DDL file."""
    text = Path(ddl_path).read_text(encoding="utf-8")
    return build_tables_str(text)


def build_tables_str(text: str) -> List[Table]:
    """Parse every table from DDL text, raising on the first failed block."""
    tables = []
    for result in iter_blocks(text):
        if not result.ok:
            raise result.error
        tables.append(result.table)
    return tables


# ------------------------------------------------------------------------------
# Block iteration

def _failed(state: ParseState) -> BlockResult:
    table_name = state.table.table_name if state.table else None
    return BlockResult(table_name=table_name, error=state.error)


def iter_blocks(text: str) -> Iterator[BlockResult]:
    """
    Yield one BlockResult per CREATE ... ); block, in input order.

    A syntax error inside a block fails that block only: the parser skips to
    the block's `);` and yields the failure there. A column line outside any
    block fails on its own.
    """
    state = INITIAL_STATE

    for lineno, line in enumerate(text.splitlines(), start=1):
        previous = state
        try:
            state, table = transition(state, line, lineno)
        except DDLSyntaxError as exc:
            opens_block = classify_line(line) is LineKind.CREATE
            if previous.phase is Phase.SKIPPING and opens_block:
                yield _failed(previous)
            if previous.phase is Phase.IDLE and not opens_block:
                logger.debug(f"  [line {lineno}] error outside table: {exc.message}")
                yield BlockResult(error=exc)
                continue
            broken = None if opens_block else previous.table
            state = ParseState(Phase.SKIPPING, broken, exc)
            logger.debug(f"  [line {lineno}] {previous.phase.value} -> skipping: {exc.message}")
            continue

        if state.phase is not previous.phase:
            logger.debug(f"  [line {lineno}] {previous.phase.value} -> {state.phase.value}")

        if previous.phase is Phase.SKIPPING and state is not previous:
            yield _failed(previous)
        elif previous.phase is Phase.IN_TABLE and state.phase is Phase.IN_TABLE and state.table.lineno != previous.table.lineno:
            logger.warning(
                f"[PARSE] Table '{previous.table.table_name}' was never closed; "
                f"dropped at line {lineno}"
            )

        if table is not None:
            logger.debug(f"  [line {lineno}] closed table '{table.table_name}' ({len(table.columns)} columns)")
            yield BlockResult(table=table)

    if state.phase is Phase.SKIPPING:
        yield _failed(state)
    elif state.phase is Phase.IN_TABLE:
        logger.warning(f"[PARSE] Table '{state.table.table_name}' was never closed; dropped at end of input")
