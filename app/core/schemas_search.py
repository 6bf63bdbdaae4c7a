"""Pydantic schemas for the search index."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class EntityType(str, Enum):
    """Entity types that can be made searchable."""
    TASK = "task"
    CONTACT = "contact"
    REPORT = "report"
    CHAT = "chat"
    DOCUMENT = "document"
    ASSET = "asset"           # Creative studio output
    DECK = "deck"             # Pitch deck


# ============================================================================
# Index rows
# ============================================================================


class IndexEntry(BaseModel):
    """Searchable projection of one entity's text fields."""
    user_id: str = Field(..., min_length=1, description="Owning account")
    entity_type: EntityType
    entity_id: str = Field(..., min_length=1, description="Primary key of the source entity")
    title: str = ""
    content: str = ""
    tags: list[str] = Field(default_factory=list, description="Stored, not scored")
    updated_at: Optional[datetime] = None


class RankedEntry(BaseModel):
    """A row returned by the ranked full-text query.

    ``entity_type`` stays a plain string: rows written before a type was
    retired must still be readable.
    """
    entity_id: str
    entity_type: str
    title: str = ""
    content: str = ""
    tags: list[str] = Field(default_factory=list)
    updated_at: Optional[datetime] = None
    rank: float = 0.0


# ============================================================================
# Requests
# ============================================================================


class SearchRequest(BaseModel):
    """Search input after boundary validation; ``query`` is always a string."""
    query: str = ""


class IndexEntityRequest(BaseModel):
    """Body of POST /search/index."""
    type: EntityType
    id: str = Field(..., min_length=1)
    title: str = ""
    content: str = ""
    tags: Optional[list[str]] = None


class RemoveEntityRequest(BaseModel):
    """Body of DELETE /search/index."""
    type: EntityType
    id: str = Field(..., min_length=1)


# ============================================================================
# Responses
# ============================================================================


class SearchResult(BaseModel):
    """One search hit, shaped for the UI."""
    id: str
    type: str
    title: str
    snippet: str
    path: str = Field(..., description="UI route that opens the entity")
    timestamp: Optional[datetime] = None
    relevance: float = Field(..., ge=0, le=100, description="Normalized rank, 0-100")


class IndexWriteResponse(BaseModel):
    success: bool = True
