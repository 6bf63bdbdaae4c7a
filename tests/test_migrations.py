"""Tests for the search index DDL shipped in migrations/."""

import re
from pathlib import Path

SEARCH_INDEX_SQL = Path(__file__).resolve().parent.parent / "migrations" / "0001_search_index.sql"


def _sql() -> str:
    return SEARCH_INDEX_SQL.read_text()


def _index_expression(sql: str) -> str:
    match = re.search(r"search_index_fts_idx ON search_index\s+USING GIN \((.+)\);", sql)
    assert match, "full-text GIN index not found"
    return match.group(1)


def test_query_function_filters_on_indexed_expression():
    """The WHERE clause must repeat the GIN index expression or the index is never used."""
    sql = _sql()
    indexed = _index_expression(sql).replace("title", "si.title").replace("content", "si.content")

    where_clause = sql.split("WHERE si.user_id = p_user_id", 1)[1]
    assert f"AND {indexed}" in where_clause


def test_text_search_config_is_a_constant():
    sql = _sql()

    assert "p_config" not in sql.split("DROP FUNCTION", 1)[1].split(";", 1)[1]
    assert "to_tsvector('english'::regconfig" in _index_expression(sql)
