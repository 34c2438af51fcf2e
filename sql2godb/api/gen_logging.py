"""
Logging for the sql2godb pipeline.

Modules log through `get_logger(__name__)`; everything lands under the
"sql2godb.gen" logger, which the CLI wires to stderr once per run. stdout is
left alone because it may carry the generated Go source.
"""

import logging
import sys

_LOGGER_NAME = "sql2godb.gen"


def get_logger(name: str = None) -> logging.Logger:
    """sql2godb.api.generators.crud_generator -> sql2godb.gen.crud_generator"""
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def resolve_level(verbose: bool = False, quiet: bool = False, default_level: str = "INFO") -> int:
    """
    -v wins over -q, and both win over the configured level.

    DEBUG shows per-line parser transitions, INFO one summary per table,
    WARNING only skipped blocks. An unknown level name falls back to INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    level = logging.getLevelName(str(default_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_gen_logging(verbose: bool = False, quiet: bool = False, default_level: str = "INFO") -> None:
    level = resolve_level(verbose, quiet, default_level)

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.propagate = False

    # One handler, bound to whatever stderr is now
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_MessageOnlyFormatter())
    root_logger.addHandler(handler)


class _MessageOnlyFormatter(logging.Formatter):
    """Callers already prefix their own tags ([GENERATED], [SKIPPED], ...)."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()
