"""Code formatting utilities."""

import shutil
import subprocess

from sql2godb.exceptions import GofmtError


def gofmt_available() -> bool:
    return shutil.which("gofmt") is not None


def format_go_code(code: str) -> str:
    """Format generated Go code with gofmt if available."""
    if not gofmt_available():
        return code

    proc = subprocess.run(
        ["gofmt"],
        input=code,
        capture_output=True,
        text=True,
        check=False,
    )
    if proc.returncode != 0:
        raise GofmtError(f"gofmt failed: {proc.stderr.strip()}")
    return proc.stdout
