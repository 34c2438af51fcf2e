"""Identifier conversions between SQL and Go naming conventions."""


def to_upper_camel(snake: str) -> str:
    """
    Convert a snake_case identifier to Go-style PascalCase.

    Every "Id" in the result becomes "ID". The replace is not word-boundary
    aware, so "identity" becomes "IDentity".

    Examples:
    - user_id -> UserID
    - created_at -> CreatedAt
    - identity -> IDentity
    """
    words = [word.capitalize() for word in snake.split("_") if word]
    return "".join(words).replace("Id", "ID")


def singularize(plural: str) -> str:
    """Drop one trailing "s". No irregular plurals: status -> statu."""
    if plural.endswith("s"):
        return plural[:-1]
    return plural


def entity_name(table_name: str) -> str:
    """Go type name for a table: users -> User, user_roles -> UserRole."""
    return to_upper_camel(singularize(table_name))


# Go keywords, plus every name the generated functions already bind
# (parameters, locals, imported packages).
RESERVED_RECEIVERS = {
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
    "cancel", "ctx", "db", "err", "id", "q", "result", "rows", "rowsAffected",
    "context", "pgx", "time", "uuid",
}


def receiver_name(table_name: str) -> str:
    """
    Go variable holding the record inside Create/Get/Update.

    users -> user. A name that would not compile in the generated functions
    gets a "Rec" suffix: types -> typeRec, ids -> idRec.
    """
    name = singularize(table_name)
    if name in RESERVED_RECEIVERS:
        return f"{name}Rec"
    return name
