"""Write path of the search index.

Entity-owning features call ``index_entity`` whenever a searchable entity is
created or its text changes, and ``remove_from_index`` whenever it is deleted.
Searches never verify that the source entity still exists, so a missed removal
shows up as a dangling result.

Index writes are not transactional with the source write. Callers write the
source first and the index second; a failure between the two leaves the entry
stale until the entity is written again. The ``*_best_effort`` variants are for
callers that have already committed the source write and should not fail
because of the index.
"""

from typing import Optional

from app.core.logging import get_logger
from app.core.schemas_search import EntityType, IndexEntry
from app.db.search_index import delete_entry, upsert_entry

logger = get_logger(__name__)


class IndexWriteError(Exception):
    """Raised when the index store rejects or fails an upsert or delete."""


def _type_label(entity_type: EntityType | str) -> str:
    return entity_type.value if isinstance(entity_type, EntityType) else str(entity_type)


def index_entity(
    user_id: str,
    entity_type: EntityType,
    entity_id: str,
    title: str,
    content: str,
    tags: Optional[list[str]] = None,
) -> None:
    """
    Create or replace the index entry for an entity.

    The entry is visible to searches as soon as this returns.

    Raises:
        IndexWriteError: If the store write fails
    """
    entry = IndexEntry(
        user_id=user_id,
        entity_type=entity_type,
        entity_id=entity_id,
        title=title or "",
        content=content or "",
        tags=tags or [],
    )

    try:
        upsert_entry(entry)
    except Exception as e:
        logger.error(
            f"Indexing failed for {entry.entity_type.value}:{entity_id}: {e}",
            extra={"user_id": user_id},
        )
        raise IndexWriteError("Indexing failed") from e


def remove_from_index(user_id: str, entity_type: EntityType, entity_id: str) -> None:
    """
    Remove an entity's index entry. Removing an unindexed entity is a no-op.

    Raises:
        IndexWriteError: If the store delete fails
    """
    try:
        delete_entry(user_id, entity_type, entity_id)
    except Exception as e:
        logger.error(
            f"Index removal failed for {_type_label(entity_type)}:{entity_id}: {e}",
            extra={"user_id": user_id},
        )
        raise IndexWriteError("Remove failed") from e


def index_entity_best_effort(
    user_id: str,
    entity_type: EntityType,
    entity_id: str,
    title: str,
    content: str,
    tags: Optional[list[str]] = None,
) -> bool:
    """Index an entity whose source write already committed.

    Returns:
        True if the entry was written, False if the write failed (logged)
    """
    try:
        index_entity(user_id, entity_type, entity_id, title, content, tags)
        return True
    except IndexWriteError:
        logger.warning(
            f"Index entry for {_type_label(entity_type)}:{entity_id} is stale until the next write",
            extra={"user_id": user_id},
        )
        return False


def remove_from_index_best_effort(user_id: str, entity_type: EntityType, entity_id: str) -> bool:
    """Remove the entry of an entity whose source row is already deleted."""
    try:
        remove_from_index(user_id, entity_type, entity_id)
        return True
    except IndexWriteError:
        logger.warning(
            f"Dangling index entry left for {_type_label(entity_type)}:{entity_id}",
            extra={"user_id": user_id},
        )
        return False
