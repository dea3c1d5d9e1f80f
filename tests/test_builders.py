"""Tests for the per-verb SQL builders."""

import pytest

from fastdb.builders import (
    SelectQuery,
    create_sql,
    delete_sql,
    insert_sql,
    parse_select,
    select_sql,
    transaction_sql,
    update_sql,
)


class TestMutationBuilders:
    """insert / update / delete / transaction builders paste fragments verbatim."""

    def test_insert(self):
        assert insert_sql("users", "1, 'Alice'") == "INSERT INTO users VALUES (1, 'Alice');"

    def test_update(self):
        assert (
            update_sql("users", "name='Bob'", "id=1")
            == "UPDATE users SET name='Bob' WHERE id=1;"
        )

    def test_delete(self):
        assert delete_sql("users", "id = 1") == "DELETE FROM users WHERE id = 1;"

    @pytest.mark.parametrize("verb", ["begin", "commit", "rollback"])
    def test_transaction(self, verb):
        assert transaction_sql(verb) == f"{verb};"

    def test_create_delegates_to_translator(self):
        assert create_sql("t", ["--int", "id"]) == "CREATE TABLE t (\n  id INTEGER\n);"


class TestSelect:
    """Tests for select parsing and assembly."""

    def test_plain(self):
        assert select_sql("*", "users", []) == "SELECT * FROM users;"

    def test_join_and_where(self):
        sql = select_sql(
            "id,name",
            "users",
            ["join", "accounts", "on", "users.id = accounts.uid", "where", "users.active=1"],
        )
        assert sql == (
            "SELECT id,name FROM users JOIN accounts ON users.id = accounts.uid "
            "WHERE users.active=1;"
        )

    def test_multiple_joins_keep_order(self):
        query = parse_select(
            "*", "a", ["join", "b", "on", "a.id=b.a", "join", "c", "on", "b.id=c.b"]
        )
        assert query.joins == [("b", "a.id=b.a"), ("c", "b.id=c.b")]

    def test_tail_clauses_emitted_in_fixed_order(self):
        sql = select_sql(
            "kind, count(*)",
            "items",
            ["limit", "5", "order", "kind", "where", "price > 0", "group", "kind"],
        )
        assert sql == (
            "SELECT kind, count(*) FROM items WHERE price > 0 "
            "GROUP BY kind ORDER BY kind LIMIT 5;"
        )

    def test_incomplete_join_is_ignored(self):
        assert select_sql("*", "a", ["join", "b", "on"]) == "SELECT * FROM a;"

    def test_unknown_tokens_are_ignored(self):
        assert select_sql("*", "a", ["bogus", "where", "x=1"]) == "SELECT * FROM a WHERE x=1;"

    def test_dangling_where_is_ignored(self):
        assert select_sql("*", "a", ["where"]) == "SELECT * FROM a;"

    def test_select_query_defaults(self):
        assert SelectQuery(fields="x", table="t").to_sql() == "SELECT x FROM t;"
