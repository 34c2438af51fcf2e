import sys
from datetime import date

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from sql2godb import __version__
from sql2godb.api.extractors import map_to_go_type
from sql2godb.api.crud_helpers import supported_operations
from sql2godb.api.gen_logging import configure_gen_logging
from sql2godb.api.generator import render_source, write_output
from sql2godb.api.utils.naming import entity_name
from sql2godb.core.config import get_settings
from sql2godb.exceptions import Sql2GoDBError, UnknownSQLTypeError
from sql2godb.language import iter_blocks

# stdout may carry the generated source
console = Console(stderr=True)


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def _read_input(input_path) -> str:
    if input_path is None:
        return sys.stdin.read()
    with open(input_path, "r", encoding="utf-8") as fh:
        return fh.read()


def _go_type_label(column) -> str:
    try:
        go_type = map_to_go_type(column.sql_type)
    except UnknownSQLTypeError:
        return "[red]unmapped[/red]"
    return f"*{go_type}" if column.nullable else go_type


def print_tables(text: str):
    """Print every parsed block: its columns, Go types and generated operations."""
    for result in iter_blocks(text):
        if not result.ok:
            name = result.table_name or "<no table>"
            console.print(f"{escape(name)}: {escape(str(result.error))}", style="red")
            continue

        table = result.table
        ops = ", ".join(supported_operations(table))
        view = RichTable(title=f"{table.table_name} -> {entity_name(table.table_name)} ({ops})")
        view.add_column("column")
        view.add_column("sql type")
        view.add_column("go type")
        view.add_column("not null")
        for column in table.columns:
            view.add_row(column.name, column.sql_type, _go_type_label(column), "yes" if column.not_null else "")
        console.print(view)


@click.command(help="Generate a Go data-access layer from SQL CREATE TABLE statements.")
@click.pass_context
@click.option("-i", "--input", "input_path", type=click.Path(dir_okay=False), default=None,
              help="Input DDL file (default: stdin).")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False), default=None,
              help="Output Go file (default: stdout).")
@click.option("--package", "package_name", default=None, help="Go package name (default: data).")
@click.option("--timeout", "timeout", type=int, default=None, help="Per-query timeout in seconds.")
@click.option("--skip-invalid", is_flag=True, default=False,
              help="Skip tables that fail to parse or map instead of aborting.")
@click.option("--inspect", "inspect_only", is_flag=True, default=False,
              help="Print the parsed tables instead of generating code.")
@click.option("--gofmt", "run_gofmt", is_flag=True, default=False, help="Format output with gofmt if installed.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Only warnings and errors.")
@click.version_option(__version__, "-version", "--version", prog_name="sql2godb", message="%(prog)s v%(version)s")
def cli(context, input_path, output_path, package_name, timeout, skip_invalid, inspect_only, run_gofmt, verbose, quiet):
    try:
        settings = get_settings().with_overrides(PACKAGE_NAME=package_name, QUERY_TIMEOUT_SECONDS=timeout)
    except ValidationError as e:
        console.print(f"{_stamp()} Invalid settings: {escape(str(e))}", style="red")
        context.exit(1)

    configure_gen_logging(verbose=verbose, quiet=quiet, default_level=settings.LOG_LEVEL)

    try:
        text = _read_input(input_path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"{_stamp()} Cannot read input: {escape(str(e))}", style="red")
        context.exit(1)

    if inspect_only:
        print_tables(text)
        context.exit(0)

    try:
        report = render_source(text, settings=settings, strict=not skip_invalid, gofmt=run_gofmt)
    except Sql2GoDBError as e:
        console.print(f"{_stamp()} Generate failed with error(s): {escape(str(e))}", style="red")
        context.exit(1)

    if output_path is None:
        click.echo(report.source, nl=False)
        context.exit(0)

    try:
        write_output(report.source, output_path)
    except OSError as e:
        console.print(f"{_stamp()} Cannot write output: {escape(str(e))}", style="red")
        context.exit(1)

    console.print(f"{_stamp()} Go code written to: {output_path}", style="green")
    context.exit(0)


def main():
    cli(prog_name="sql2godb")


if __name__ == "__main__":
    main()
