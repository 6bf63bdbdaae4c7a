"""UI routes for search results, keyed by entity type."""

from types import MappingProxyType
from typing import Mapping

from app.core.schemas_search import EntityType

DEFAULT_PATH = "/app/dashboard"

# Templates may use {entity_id}. Types without an entry open the dashboard.
ENTITY_PATHS: Mapping[EntityType, str] = MappingProxyType({
    EntityType.TASK: "/app/roadmap",
    EntityType.CONTACT: "/app/network",
    EntityType.REPORT: "/app/competitor-stalker",
    EntityType.CHAT: "/app/chat/{entity_id}",
    EntityType.ASSET: "/app/studio",
    EntityType.DECK: "/app/deck",
})


def get_path_for_type(entity_type: EntityType | str, entity_id: str) -> str:
    """
    Get the UI path that opens an entity.

    Args:
        entity_type: Entity type, as enum or raw stored value
        entity_id: Entity ID, used by parameterized routes

    Returns:
        Route for the entity, or DEFAULT_PATH for types with no view
    """
    try:
        key = EntityType(entity_type)
    except ValueError:
        return DEFAULT_PATH

    template = ENTITY_PATHS.get(key)
    if template is None:
        return DEFAULT_PATH
    return template.format(entity_id=entity_id)
