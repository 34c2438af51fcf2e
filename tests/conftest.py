"""
Pytest configuration and shared fixtures for the sql2godb test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from sql2godb.core.config import Settings
from sql2godb.language import build_tables_str


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir(project_root):
    """Return the directory holding DDL inputs and golden outputs."""
    return project_root / "tests" / "fixtures"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated code output."""
    temp_dir = tempfile.mkdtemp(prefix="sql2godb_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep SQL2GODB_* variables and stray .env files out of the tests."""
    import os
    for key in list(os.environ):
        if key.startswith("SQL2GODB_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    """Default generation settings."""
    return Settings()


@pytest.fixture
def users_ddl():
    """The canonical id/name/version table."""
    return """CREATE TABLE users (
    id bigserial PRIMARY KEY,
    name text NOT NULL,
    version int NOT NULL
);
"""


@pytest.fixture
def blog_ddl():
    """Two tables exercising every column role."""
    return """-- blog schema
CREATE TABLE posts (
    id uuid PRIMARY KEY,
    author_id bigint NOT NULL,
    title text NOT NULL,
    body text,
    published boolean NOT NULL,
    created_at timestamp(0) NOT NULL,
    created_by bigint NOT NULL,
    edited_at timestamp(0),
    version int NOT NULL,
    UNIQUE (title)
);

CREATE TABLE tags (
    name text NOT NULL,
    post_id uuid NOT NULL,
    PRIMARY KEY (name, post_id)
);
"""


@pytest.fixture
def parse_table():
    """Factory fixture: parse DDL text holding exactly one table."""
    def _parse(ddl: str):
        tables = build_tables_str(ddl)
        assert len(tables) == 1
        return tables[0]
    return _parse


@pytest.fixture
def write_ddl_file(temp_output_dir):
    """Factory fixture to write DDL content to a temporary file."""
    def _write(content: str, filename: str = "schema.sql") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _write
