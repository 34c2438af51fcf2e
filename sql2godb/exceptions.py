"""
Error types raised by the sql2godb pipeline.

Every failure is terminal for the block it occurs in. The driver decides
whether that also ends the run (strict mode) or only drops the block.
"""

from typing import Optional


class Sql2GoDBError(Exception):
    """Base class for all pipeline errors."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class DDLSyntaxError(Sql2GoDBError):
    """A CREATE or column line could not be understood."""


class UnknownSQLTypeError(Sql2GoDBError):
    """A column declares a type token with no Go mapping."""

    def __init__(self, token: str, column: Optional[str] = None, line: Optional[int] = None):
        self.token = token
        self.column = column
        message = f"No conversion for type '{token}'"
        if column:
            message += f" (column '{column}')"
        super().__init__(message, line=line)


class GofmtError(Sql2GoDBError):
    """gofmt rejected the generated source."""
