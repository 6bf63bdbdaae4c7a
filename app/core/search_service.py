"""Read path of the search index: validate, run the ranked query, shape results."""

from typing import Any

from app.core.config import get_settings
from app.core.logging import get_logger
from app.core.schemas_search import RankedEntry, SearchResult
from app.core.search_routes import get_path_for_type
from app.db.search_index import query_ranked

logger = get_logger(__name__)

SNIPPET_SUFFIX = "..."


class SearchQueryError(Exception):
    """Raised when the ranked query fails in the store."""


def normalize_query(raw_query: Any) -> str:
    """Narrow arbitrary input to a query string. Non-strings become empty."""
    if not isinstance(raw_query, str):
        return ""
    return raw_query.strip()


def normalize_relevance(rank: float) -> float:
    """
    Map a ``ts_rank`` score onto 0-100.

    Uses ``rank / (rank + 1)`` so the result is monotonic in rank and does not
    depend on the other rows in the result set.
    """
    if rank <= 0:
        return 0.0
    return round(100 * rank / (rank + 1), 2)


def build_snippet(content: str, max_chars: int) -> str:
    return (content or "")[:max_chars] + SNIPPET_SUFFIX


def to_search_result(row: RankedEntry, snippet_chars: int) -> SearchResult:
    """Shape one ranked row for the UI."""
    return SearchResult(
        id=row.entity_id,
        type=row.entity_type,
        title=row.title,
        snippet=build_snippet(row.content, snippet_chars),
        path=get_path_for_type(row.entity_type, row.entity_id),
        timestamp=row.updated_at,
        relevance=normalize_relevance(row.rank),
    )


def search(user_id: str, raw_query: Any) -> list[SearchResult]:
    """
    Search one user's index.

    Non-string input and queries shorter than SEARCH_MIN_QUERY_LENGTH return
    an empty list without touching the store.

    Surrounding whitespace is stripped before the length check, so "  a  "
    counts as one character.

    Args:
        user_id: Owner whose entries are searched
        raw_query: Query as received; anything but a string is treated as empty

    Returns:
        At most SEARCH_RESULT_LIMIT results, most relevant first

    Raises:
        SearchQueryError: If the ranked query fails
    """
    settings = get_settings()
    query = normalize_query(raw_query)

    if len(query) < settings.SEARCH_MIN_QUERY_LENGTH:
        return []

    try:
        rows = query_ranked(user_id, query, settings.SEARCH_RESULT_LIMIT)
    except Exception as e:
        logger.error(f"Search failed: {e}", extra={"user_id": user_id})
        raise SearchQueryError("Search failed") from e

    results = [
        to_search_result(row, settings.SEARCH_SNIPPET_CHARS)
        for row in rows[: settings.SEARCH_RESULT_LIMIT]
    ]

    logger.debug(
        f"Search returned {len(results)} results",
        extra={"user_id": user_id},
    )
    return results
