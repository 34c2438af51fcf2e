"""
SQL statement builders for the generated CRUD functions.

Each builder returns a plain dict ready for template rendering:
    query         SQL text placed inside the Go raw string literal
    args          Go expressions bound to $1..$n, in order
    scan_targets  Go pointers receiving RETURNING values (may be empty)
"""

from ..crud_helpers import (
    IDENTITY_COLUMN,
    UPDATE_SERVER_EXPRESSIONS,
    VERSION_COLUMN,
    get_insertable_columns,
    get_returning_columns,
    get_updatable_columns,
    supports_operation,
)
from ..utils.naming import receiver_name, to_upper_camel


def _field(receiver, column_name):
    return f"{receiver}.{to_upper_camel(column_name)}"


def _require(table, operation):
    if not supports_operation(table, operation):
        raise ValueError(
            f"Table '{table.table_name}' cannot have a {operation} statement: "
            f"missing required columns"
        )


def build_insert(table):
    """
    INSERT for every insertable column, RETURNING id and/or version when present.

    Example (users: id, name, version):
        INSERT INTO users (name)
        VALUES ($1)
        RETURNING id, version
    """
    receiver = receiver_name(table.table_name)
    columns = get_insertable_columns(table)
    returning = get_returning_columns(table)

    if columns:
        names = ", ".join(c.name for c in columns)
        placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
        lines = [f"INSERT INTO {table.table_name} ({names})", f"VALUES ({placeholders})"]
    else:
        lines = [f"INSERT INTO {table.table_name}", "DEFAULT VALUES"]

    if returning:
        lines.append("RETURNING " + ", ".join(c.name for c in returning))

    return {
        "query": "\n".join(lines),
        "args": [_field(receiver, c.name) for c in columns],
        "scan_targets": [f"&{_field(receiver, c.name)}" for c in returning],
    }


def build_select_by_id(table):
    _require(table, "get")
    return {
        "query": f"SELECT * FROM {table.table_name} WHERE {IDENTITY_COLUMN} = $1",
        "args": [IDENTITY_COLUMN],
        "scan_targets": [],
    }


def build_update(table):
    """
    Optimistic-concurrency UPDATE: bumps version and only matches the version
    the caller read. No returned row means someone else changed or deleted it.

    Example (users: id, name, version):
        UPDATE users
        SET name = $1, version = version + 1
        WHERE id = $2 AND version = $3
        RETURNING version
    """
    _require(table, "update")
    receiver = receiver_name(table.table_name)

    assignments = []
    args = []
    for column in get_updatable_columns(table):
        server_expr = UPDATE_SERVER_EXPRESSIONS.get(column.name)
        if server_expr:
            assignments.append(f"{column.name} = {server_expr}")
            continue
        args.append(_field(receiver, column.name))
        assignments.append(f"{column.name} = ${len(args)}")
    assignments.append(f"{VERSION_COLUMN} = {VERSION_COLUMN} + 1")

    id_param = len(args) + 1
    where = f"{IDENTITY_COLUMN} = ${id_param} AND {VERSION_COLUMN} = ${id_param + 1}"
    args.append(_field(receiver, IDENTITY_COLUMN))
    args.append(_field(receiver, VERSION_COLUMN))

    query = "\n".join([
        f"UPDATE {table.table_name}",
        "SET " + ", ".join(assignments),
        f"WHERE {where}",
        f"RETURNING {VERSION_COLUMN}",
    ])
    return {
        "query": query,
        "args": args,
        "scan_targets": [f"&{_field(receiver, VERSION_COLUMN)}"],
    }


def build_delete_by_id(table):
    _require(table, "delete")
    return {
        "query": f"DELETE FROM {table.table_name} WHERE {IDENTITY_COLUMN} = $1",
        "args": [IDENTITY_COLUMN],
        "scan_targets": [],
    }
