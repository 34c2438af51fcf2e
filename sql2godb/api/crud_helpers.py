"""
CRUD conventions for generated data-access functions.
Maps well-known column names to the role they play in each operation.
"""

IDENTITY_COLUMN = "id"
VERSION_COLUMN = "version"

# Server-assigned on insert; never bound as INSERT parameters
CREATE_EXCLUDED_COLUMNS = {"id", "version", "created_at", "edited_at"}

# Immutable after insert; never part of an UPDATE's SET list
UPDATE_EXCLUDED_COLUMNS = {"id", "version", "created_at", "created_by"}

# Columns the server refreshes on every UPDATE instead of taking a parameter
UPDATE_SERVER_EXPRESSIONS = {
    "edited_at": "NOW()",
}

OPERATIONS = ("create", "get", "update", "delete")

# Columns each operation needs before it can be generated
OPERATION_REQUIRED_COLUMNS = {
    "create": (),
    "get": (IDENTITY_COLUMN,),
    "update": (IDENTITY_COLUMN, VERSION_COLUMN),
    "delete": (IDENTITY_COLUMN,),
}


def has_identity(table):
    return table.has_column(IDENTITY_COLUMN)


def has_version(table):
    return table.has_column(VERSION_COLUMN)


def supports_operation(table, operation):
    """Check whether `table` has every column `operation` depends on."""
    required = OPERATION_REQUIRED_COLUMNS[operation]
    return all(table.has_column(name) for name in required)


def supported_operations(table):
    return [op for op in OPERATIONS if supports_operation(table, op)]


def get_insertable_columns(table):
    """Columns bound as INSERT parameters, in declaration order."""
    return [c for c in table.columns if c.name not in CREATE_EXCLUDED_COLUMNS]


def get_returning_columns(table):
    """Server-generated columns echoed back by INSERT: id first, then version."""
    names = (IDENTITY_COLUMN, VERSION_COLUMN)
    return [table.get_column(name) for name in names if table.has_column(name)]


def get_updatable_columns(table):
    """Columns appearing in an UPDATE's SET list, in declaration order."""
    return [c for c in table.columns if c.name not in UPDATE_EXCLUDED_COLUMNS]
