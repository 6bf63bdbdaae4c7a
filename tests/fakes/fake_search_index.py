"""Fake in-memory search index for behavioural testing.

Approximates Postgres full-text search closely enough for ranking tests:
lowercased word tokens, a small stopword list, every query term required
(like ``plainto_tsquery``), rank = term occurrences across title and content.
"""

import re
from datetime import UTC, datetime, timedelta
from typing import Any, Dict, List, Tuple

from app.core.schemas_search import EntityType, IndexEntry, RankedEntry

STOPWORDS = {"a", "an", "and", "are", "by", "for", "in", "is", "of", "on", "or", "the", "to", "with"}

_BASE_TIME = datetime(2026, 1, 1, tzinfo=UTC)


def tokenize(text: str) -> List[str]:
    return [t for t in re.findall(r"\w+", text.lower()) if t not in STOPWORDS]


class FakeSearchIndex:
    """In-memory stand-in for the search_index table and its RPC."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.rows: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        self._writes = 0

    def _now(self) -> datetime:
        # Strictly increasing so tie-breaks on updated_at are deterministic
        self._writes += 1
        return _BASE_TIME + timedelta(seconds=self._writes)

    def upsert_entry(self, entry: IndexEntry) -> Dict[str, Any]:
        entity_type = EntityType(entry.entity_type).value
        row = {
            "user_id": entry.user_id,
            "entity_type": entity_type,
            "entity_id": entry.entity_id,
            "title": entry.title,
            "content": entry.content,
            "tags": list(entry.tags),
            "updated_at": self._now(),
        }
        self.rows[(entry.user_id, entity_type, entry.entity_id)] = row
        return row

    def delete_entry(self, user_id: str, entity_type, entity_id: str) -> None:
        self.rows.pop((user_id, EntityType(entity_type).value, entity_id), None)

    def query_ranked(self, user_id: str, query_text: str, limit: int) -> List[RankedEntry]:
        terms = tokenize(query_text)
        if not terms:
            return []

        matches = []
        for row in self.rows.values():
            if row["user_id"] != user_id:
                continue
            tokens = tokenize(f"{row['title']} {row['content']}")
            if not all(term in tokens for term in terms):
                continue
            rank = sum(tokens.count(term) for term in terms) / 10
            matches.append(RankedEntry(**row, rank=rank))

        matches.sort(key=lambda r: (r.rank, r.updated_at), reverse=True)
        return matches[:limit]

    def entries_for(self, user_id: str) -> List[Dict[str, Any]]:
        return [row for key, row in self.rows.items() if key[0] == user_id]
