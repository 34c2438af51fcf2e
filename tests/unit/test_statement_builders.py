"""
Unit tests for SQL statement assembly and CRUD column roles.
"""

import pytest

from sql2godb.api.builders import (
    build_delete_by_id,
    build_insert,
    build_select_by_id,
    build_update,
)
from sql2godb.api.crud_helpers import (
    get_insertable_columns,
    get_returning_columns,
    get_updatable_columns,
    supported_operations,
)
from sql2godb.lib.table import Column, Table


def _table(name, *columns):
    return Table(name, [Column(c, "text", not_null=True) for c in columns])


class TestColumnRoles:
    """Test how well-known columns are partitioned per operation."""

    def test_insertable_excludes_server_columns(self):
        table = _table("posts", "id", "title", "created_at", "created_by", "edited_at", "version")
        assert [c.name for c in get_insertable_columns(table)] == ["title", "created_by"]

    def test_updatable_excludes_immutable_columns(self):
        table = _table("posts", "id", "title", "created_at", "created_by", "edited_at", "version")
        assert [c.name for c in get_updatable_columns(table)] == ["title", "edited_at"]

    def test_returning_is_id_then_version(self):
        table = _table("posts", "version", "title", "id")
        assert [c.name for c in get_returning_columns(table)] == ["id", "version"]

    @pytest.mark.parametrize("columns, operations", [
        (("id", "name", "version"), ["create", "get", "update", "delete"]),
        (("id", "name"), ["create", "get", "delete"]),
        (("name", "version"), ["create"]),
        (("name",), ["create"]),
    ])
    def test_supported_operations(self, columns, operations):
        assert supported_operations(_table("things", *columns)) == operations


class TestBuildInsert:
    """Test INSERT assembly."""

    def test_returns_id_and_version(self):
        stmt = build_insert(_table("users", "id", "name", "version"))

        assert stmt["query"] == "INSERT INTO users (name)\nVALUES ($1)\nRETURNING id, version"
        assert stmt["args"] == ["user.Name"]
        assert stmt["scan_targets"] == ["&user.ID", "&user.Version"]

    def test_placeholders_follow_column_order(self):
        stmt = build_insert(_table("posts", "id", "author_id", "title", "created_at", "body"))

        assert stmt["query"].splitlines()[:2] == [
            "INSERT INTO posts (author_id, title, body)",
            "VALUES ($1, $2, $3)",
        ]
        assert stmt["args"] == ["post.AuthorID", "post.Title", "post.Body"]

    def test_only_identity(self):
        stmt = build_insert(_table("users", "id", "name"))
        assert stmt["query"].endswith("\nRETURNING id")
        assert stmt["scan_targets"] == ["&user.ID"]

    def test_only_version(self):
        stmt = build_insert(_table("users", "name", "version"))
        assert stmt["query"].endswith("\nRETURNING version")
        assert stmt["scan_targets"] == ["&user.Version"]

    def test_no_returning_clause(self):
        stmt = build_insert(_table("tags", "name", "post_id"))

        assert stmt["query"] == "INSERT INTO tags (name, post_id)\nVALUES ($1, $2)"
        assert "RETURNING" not in stmt["query"]
        assert stmt["scan_targets"] == []

    def test_nothing_to_insert_uses_default_values(self):
        stmt = build_insert(_table("counters", "id", "created_at"))

        assert stmt["query"] == "INSERT INTO counters\nDEFAULT VALUES\nRETURNING id"
        assert stmt["args"] == []


class TestBuildSelectAndDelete:
    """Test the primary-key statements."""

    def test_select_by_id(self):
        stmt = build_select_by_id(_table("users", "id", "name"))
        assert stmt["query"] == "SELECT * FROM users WHERE id = $1"
        assert stmt["args"] == ["id"]

    def test_delete_by_id(self):
        stmt = build_delete_by_id(_table("users", "id", "name"))
        assert stmt["query"] == "DELETE FROM users WHERE id = $1"
        assert stmt["args"] == ["id"]

    def test_require_identity(self):
        with pytest.raises(ValueError):
            build_select_by_id(_table("tags", "name"))
        with pytest.raises(ValueError):
            build_delete_by_id(_table("tags", "name"))


class TestBuildUpdate:
    """Test optimistic-concurrency UPDATE assembly."""

    def test_simple_table(self):
        stmt = build_update(_table("users", "id", "name", "version"))

        assert stmt["query"] == (
            "UPDATE users\n"
            "SET name = $1, version = version + 1\n"
            "WHERE id = $2 AND version = $3\n"
            "RETURNING version"
        )
        assert stmt["args"] == ["user.Name", "user.ID", "user.Version"]
        assert stmt["scan_targets"] == ["&user.Version"]

    def test_edited_at_uses_server_time(self):
        stmt = build_update(
            _table("posts", "id", "title", "created_at", "created_by", "edited_at", "body", "version")
        )

        set_line = stmt["query"].splitlines()[1]
        assert set_line == "SET title = $1, edited_at = NOW(), body = $2, version = version + 1"
        assert stmt["query"].splitlines()[2] == "WHERE id = $3 AND version = $4"
        assert stmt["args"] == ["post.Title", "post.Body", "post.ID", "post.Version"]

    def test_requires_id_and_version(self):
        with pytest.raises(ValueError):
            build_update(_table("users", "id", "name"))
        with pytest.raises(ValueError):
            build_update(_table("users", "name", "version"))
