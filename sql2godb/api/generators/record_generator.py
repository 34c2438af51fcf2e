"""Go struct generation from a table model."""

from sql2godb.templates import render_template

from ..extractors import go_field_type, go_type_imports
from ..gen_logging import get_logger
from ..utils.naming import entity_name, to_upper_camel

logger = get_logger(__name__)


def build_record_fields(table):
    """
    One field config per column, in declaration order.

    Raises:
        UnknownSQLTypeError: a column type has no Go mapping.
    """
    fields = []
    for column in table.columns:
        fields.append({
            "name": to_upper_camel(column.name),
            "go_type": go_field_type(column),
            "column": column.name,
        })
    return fields


def generate_record_type(table):
    """Render the struct for `table`. Returns (code, import paths)."""
    fields = build_record_fields(table)

    imports = set()
    for field in fields:
        imports |= go_type_imports(field["go_type"])

    code = render_template(
        "record.go.jinja",
        entity=entity_name(table.table_name),
        fields=fields,
    )
    logger.debug(f"  [RECORD] {entity_name(table.table_name)}: {len(fields)} fields")
    return code, imports
