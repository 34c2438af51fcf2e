"""Type mapping from SQL column types to Go types."""

from sql2godb.exceptions import UnknownSQLTypeError

# Closed on purpose: a new SQL type needs a row here.
SQL_TO_GO_TYPES = {
    "bigserial": "int64",
    "bigint": "int64",
    "int": "int32",
    "text": "string",
    "date": "time.Time",
    "time": "time.Time",
    "timestamp(0)": "time.Time",
    "uuid": "uuid.UUID",
    "boolean": "bool",
}

# Go package prefix -> import path
GO_TYPE_IMPORTS = {
    "time": "time",
    "uuid": "github.com/google/uuid",
}


def strip_trailing_comma(token: str) -> str:
    if token.endswith(","):
        return token[:-1]
    return token


def map_to_go_type(sql_type: str, column: str = None, line: int = None) -> str:
    """Map a raw SQL type token (possibly ending in ',') to a Go type."""
    real_name = strip_trailing_comma(sql_type)
    try:
        return SQL_TO_GO_TYPES[real_name]
    except KeyError:
        raise UnknownSQLTypeError(sql_type, column=column, line=line) from None


def go_field_type(column) -> str:
    """Go type of a struct field; nullable columns become pointers."""
    go_type = map_to_go_type(column.sql_type, column=column.name, line=column.lineno)
    if column.nullable:
        return f"*{go_type}"
    return go_type


def go_type_imports(go_type: str) -> set:
    """Import paths a (possibly pointer) Go type needs."""
    base = go_type.lstrip("*")
    if "." not in base:
        return set()
    package = base.split(".", 1)[0]
    path = GO_TYPE_IMPORTS.get(package)
    return {path} if path else set()
