"""Database operations for the per-user full-text search index.

Every read and write here carries an explicit ``user_id`` filter. The table is
shared by all accounts, so that filter is the only thing keeping one user's
entries out of another user's results.
"""

from datetime import UTC, datetime
from typing import Any

from app.core.logging import get_logger
from app.core.schemas_search import EntityType, IndexEntry, RankedEntry
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)

SEARCH_INDEX_TABLE = "search_index"
SEARCH_QUERY_RPC = "search_index_query"
UNIQUE_KEY = "user_id,entity_type,entity_id"


def _entity_type_value(entity_type: EntityType | str) -> str:
    return entity_type.value if isinstance(entity_type, EntityType) else str(entity_type)


def upsert_entry(entry: IndexEntry) -> dict[str, Any]:
    """
    Insert an index row or replace the one with the same owner, type and id.

    Args:
        entry: Entry to store; ``updated_at`` is overwritten with now

    Returns:
        The stored row

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    data = {
        "user_id": entry.user_id,
        "entity_type": _entity_type_value(entry.entity_type),
        "entity_id": entry.entity_id,
        "title": entry.title,
        "content": entry.content,
        "tags": entry.tags,
        "updated_at": datetime.now(UTC).isoformat(),
    }

    response = (
        supabase.table(SEARCH_INDEX_TABLE)
        .upsert(data, on_conflict=UNIQUE_KEY)
        .execute()
    )

    logger.debug(
        f"Upserted index entry {data['entity_type']}:{entry.entity_id}",
        extra={"user_id": entry.user_id},
    )

    return response.data[0] if response.data else data


def delete_entry(user_id: str, entity_type: EntityType | str, entity_id: str) -> None:
    """
    Remove an index row. Deleting a row that does not exist is a no-op.

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()
    type_value = _entity_type_value(entity_type)

    response = (
        supabase.table(SEARCH_INDEX_TABLE)
        .delete()
        .eq("user_id", user_id)
        .eq("entity_type", type_value)
        .eq("entity_id", entity_id)
        .execute()
    )

    logger.debug(
        f"Deleted {len(response.data or [])} index entries for {type_value}:{entity_id}",
        extra={"user_id": user_id},
    )


def query_ranked(user_id: str, query_text: str, limit: int) -> list[RankedEntry]:
    """
    Run a ranked full-text query over one user's entries.

    Matching and ranking happen in Postgres: ``plainto_tsquery`` against
    ``to_tsvector('english', title || ' ' || content)``, scored with ``ts_rank`` and
    ordered by rank then ``updated_at``, both descending.

    Args:
        user_id: Owner whose entries are searched
        query_text: Natural-language query
        limit: Maximum rows to return

    Returns:
        Matching rows, best first

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    response = supabase.rpc(
        SEARCH_QUERY_RPC,
        {
            "p_user_id": user_id,
            "p_query": query_text,
            "p_limit": limit,
        },
    ).execute()

    rows = response.data or []
    return [RankedEntry(**{**row, "tags": row.get("tags") or []}) for row in rows[:limit]]
