"""
Main entry point for sql2godb code generation.

Text in, text out: DDL is parsed block by block, each completed table is
turned into a Go section, and the sections are assembled under a single
package header. Where the text comes from and where it goes is left to the
caller (see cli/cli.py).

Architecture:
    - language.py / parser/: DDL text -> Table models
    - extractors/: SQL -> Go type mapping
    - builders/: SQL statement assembly per CRUD operation
    - generators/: Go struct and function rendering
    - utils/: naming conventions, gofmt
"""

import os
import stat
import tempfile
from pathlib import Path

from sql2godb.core.config import Settings
from sql2godb.exceptions import Sql2GoDBError
from sql2godb.language import iter_blocks
from sql2godb.lib.results import BlockResult, GenerationReport
from sql2godb.templates import render_template

from .gen_logging import get_logger
from .generators import generate_table_code
from .utils.formatters import format_go_code

logger = get_logger(__name__)


def _split_imports(imports):
    """Go convention: standard library paths first, then everything with a domain."""
    stdlib = sorted(p for p in imports if "." not in p.split("/", 1)[0])
    external = sorted(p for p in imports if p not in stdlib)
    return stdlib, external


def render_header(settings, imports) -> str:
    stdlib, external = _split_imports(imports)
    return render_template(
        "header.go.jinja",
        package=settings.PACKAGE_NAME,
        stdlib_imports=stdlib,
        external_imports=external,
    )


def generate_block(result: BlockResult, settings) -> BlockResult:
    """Attach generated code to a parsed block, or the error that stopped it."""
    if not result.ok:
        return result
    try:
        code, imports = generate_table_code(result.table, settings)
    except Sql2GoDBError as exc:
        return BlockResult(table=result.table, error=exc)
    return BlockResult(table=result.table, code=code, imports=imports)


def render_source(text: str, settings: Settings = None, strict: bool = True, gofmt: bool = False) -> GenerationReport:
    """
    Generate the Go package for all tables in `text`.

    Args:
        text: DDL input
        settings: generation settings (package name, timeout, db type)
        strict: raise on the first failed block instead of skipping it
        gofmt: run the result through gofmt when it is installed

    Raises:
        Sql2GoDBError: in strict mode, the first parse or type error.
    """
    settings = settings or Settings()
    results = []

    for parsed in iter_blocks(text):
        result = generate_block(parsed, settings)
        if not result.ok:
            if strict:
                raise result.error
            name = result.table_name or "<unknown>"
            logger.warning(f"[SKIPPED] {name}: {result.error}")
        results.append(result)

    report = GenerationReport(source="", results=results)
    imports = set()
    for result in report.generated:
        imports |= result.imports

    parts = [render_header(settings, imports)]
    parts.extend(result.code for result in report.generated)
    source = "\n".join(parts)

    if gofmt:
        source = format_go_code(source)

    report.source = source
    logger.info(f"[DONE] {len(report.generated)} table(s) generated, {len(report.failed)} skipped")
    return report


def _target_mode(path: Path) -> int:
    """Mode for the written file: the existing target's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_output(source: str, output_path) -> Path:
    """
    Write `source` to `output_path` atomically.

    The text goes to a temporary file next to the target and is renamed into
    place, so a failure never leaves a half-written file behind. The target
    keeps its permission bits; a new file gets the usual umask-derived mode.
    """
    path = Path(output_path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent or "."))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(source)
        os.chmod(tmp, _target_mode(path))
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    logger.debug(f"  wrote {len(source)} bytes to {path}")
    return path


__all__ = [
    "render_source",
    "render_header",
    "generate_block",
    "write_output",
]
