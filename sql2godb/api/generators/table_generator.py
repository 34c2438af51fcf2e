"""Generation of one table's full section: struct followed by its CRUD functions."""

from ..gen_logging import get_logger
from ..utils.naming import entity_name
from .crud_generator import generate_crud_functions
from .record_generator import generate_record_type

logger = get_logger(__name__)


def generate_table_code(table, settings):
    """
    Render the section for one table.

    Returns:
        (code, import paths). Sections are separated by one blank line.

    Raises:
        UnknownSQLTypeError: before anything is rendered for this table.
    """
    record, imports = generate_record_type(table)
    functions, function_imports = generate_crud_functions(table, settings)
    imports |= function_imports

    code = "\n".join([record] + [code for _, code in functions])
    operations = ", ".join(op for op, _ in functions)
    logger.info(f"[GENERATED] {table.table_name} -> {entity_name(table.table_name)} ({operations})")
    return code, imports
