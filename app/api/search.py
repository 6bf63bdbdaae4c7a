"""Search API - ranked full-text search and manual index maintenance."""

import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from app.core.auth_middleware import AuthContext, require_auth
from app.core.logging import get_logger
from app.core.schemas_search import (
    IndexEntityRequest,
    IndexWriteResponse,
    RemoveEntityRequest,
    SearchRequest,
    SearchResult,
)
from app.core.search_indexer import IndexWriteError, index_entity, remove_from_index
from app.core.search_service import SearchQueryError, normalize_query, search

logger = get_logger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


async def parse_search_request(request: Request) -> SearchRequest:
    """
    Narrow the incoming request to a SearchRequest.

    ``?q=`` wins over the JSON body's ``query``. A repeated ``q`` parameter,
    a non-string ``query`` or an unreadable body all yield an empty query.
    """
    raw: Any = None

    values = request.query_params.getlist("q")
    if len(values) == 1:
        raw = values[0]
    elif values:
        raw = values
    else:
        body = await request.body()
        if body:
            try:
                payload = json.loads(body)
            # Deeply nested arrays raise RecursionError rather than ValueError
            except (ValueError, RecursionError):
                payload = None
            if isinstance(payload, dict):
                raw = payload.get("query")

    return SearchRequest(query=normalize_query(raw))


# ============================================================================
# Endpoints
# ============================================================================


@router.post("", response_model=list[SearchResult])
def search_index(
    search_request: SearchRequest = Depends(parse_search_request),
    auth: AuthContext = Depends(require_auth),
):
    """
    Search the caller's index.

    Malformed or too-short queries return an empty list rather than an error.
    """
    try:
        return search(auth.user_id, search_request.query)
    except SearchQueryError:
        raise HTTPException(status_code=500, detail="Search failed")
    except Exception as e:
        logger.exception(f"Unexpected search error: {e}", extra={"user_id": auth.user_id})
        raise HTTPException(status_code=500, detail="Search failed")


@router.post("/index", response_model=IndexWriteResponse)
def index_search_entity(
    body: IndexEntityRequest,
    auth: AuthContext = Depends(require_auth),
):
    """Index or re-index one entity for the caller."""
    try:
        index_entity(auth.user_id, body.type, body.id, body.title, body.content, body.tags)
    except IndexWriteError:
        raise HTTPException(status_code=500, detail="Indexing failed")

    return IndexWriteResponse(success=True)


@router.delete("/index", response_model=IndexWriteResponse)
def remove_search_entity(
    body: RemoveEntityRequest,
    auth: AuthContext = Depends(require_auth),
):
    """Remove one entity from the caller's index."""
    try:
        remove_from_index(auth.user_id, body.type, body.id)
    except IndexWriteError:
        raise HTTPException(status_code=500, detail="Remove failed")

    return IndexWriteResponse(success=True)
