"""
Code generators for sql2godb.

- record_generator: Go struct per table
- crud_generator: Create/Get/Update/Delete functions per table
"""

from .record_generator import generate_record_type, build_record_fields
from .crud_generator import (
    generate_create,
    generate_get,
    generate_update,
    generate_delete,
    generate_crud_functions,
)
from .table_generator import generate_table_code

__all__ = [
    "generate_record_type",
    "build_record_fields",
    "generate_create",
    "generate_get",
    "generate_update",
    "generate_delete",
    "generate_crud_functions",
    "generate_table_code",
]
