"""
CRUD function generation for one table.

Create is always generated. Get and Delete need an `id` column; Update needs
both `id` and `version`. A missing column silently drops the function.
"""

from sql2godb.templates import render_template

from ..builders import build_delete_by_id, build_insert, build_select_by_id, build_update
from ..crud_helpers import IDENTITY_COLUMN, supports_operation
from ..extractors import map_to_go_type
from ..gen_logging import get_logger
from ..utils.naming import entity_name, receiver_name

logger = get_logger(__name__)

CONTEXT_IMPORTS = {"context", "time"}
PGX_IMPORT = "github.com/jackc/pgx/v5"


def _base_context(table, settings):
    return {
        "entity": entity_name(table.table_name),
        "receiver": receiver_name(table.table_name),
        "db_interface": settings.DB_INTERFACE,
        "timeout": settings.QUERY_TIMEOUT_SECONDS,
    }


def _id_type(table):
    column = table.get_column(IDENTITY_COLUMN)
    return map_to_go_type(column.sql_type, column=column.name, line=column.lineno)


def generate_create(table, settings):
    return render_template(
        "create.go.jinja",
        stmt=build_insert(table),
        **_base_context(table, settings),
    )


def generate_get(table, settings):
    if not supports_operation(table, "get"):
        return ""
    return render_template(
        "get.go.jinja",
        stmt=build_select_by_id(table),
        id_type=_id_type(table),
        **_base_context(table, settings),
    )


def generate_update(table, settings):
    if not supports_operation(table, "update"):
        return ""
    return render_template(
        "update.go.jinja",
        stmt=build_update(table),
        **_base_context(table, settings),
    )


def generate_delete(table, settings):
    if not supports_operation(table, "delete"):
        return ""
    return render_template(
        "delete.go.jinja",
        stmt=build_delete_by_id(table),
        id_type=_id_type(table),
        **_base_context(table, settings),
    )


CRUD_GENERATORS = (
    ("create", generate_create),
    ("get", generate_get),
    ("update", generate_update),
    ("delete", generate_delete),
)


def generate_crud_functions(table, settings):
    """
    Render every applicable CRUD function.

    Returns:
        (list of (operation, code) pairs, import paths used)
    """
    sections = []
    for operation, generate in CRUD_GENERATORS:
        code = generate(table, settings)
        if code:
            sections.append((operation, code))
        else:
            logger.debug(f"  [SKIP] {operation} for '{table.table_name}': missing id/version column")

    imports = set(CONTEXT_IMPORTS)
    if any(op in ("get", "delete") for op, _ in sections):
        imports.add(PGX_IMPORT)
    return sections, imports
