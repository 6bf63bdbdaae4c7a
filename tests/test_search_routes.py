"""Tests for the entity type to UI path table."""

import pytest

from app.core.schemas_search import EntityType
from app.core.search_routes import DEFAULT_PATH, ENTITY_PATHS, get_path_for_type


@pytest.mark.parametrize(
    "entity_type,expected",
    [
        (EntityType.TASK, "/app/roadmap"),
        (EntityType.CONTACT, "/app/network"),
        (EntityType.REPORT, "/app/competitor-stalker"),
        (EntityType.CHAT, "/app/chat/abc123"),
        (EntityType.ASSET, "/app/studio"),
        (EntityType.DECK, "/app/deck"),
        (EntityType.DOCUMENT, "/app/dashboard"),
    ],
)
def test_known_types(entity_type, expected):
    assert get_path_for_type(entity_type, "abc123") == expected


def test_raw_string_values_are_accepted():
    assert get_path_for_type("task", "t1") == "/app/roadmap"
    assert get_path_for_type("chat", "agent-7") == "/app/chat/agent-7"


def test_unrecognized_type_uses_default():
    assert get_path_for_type("spreadsheet", "s1") == DEFAULT_PATH


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ENTITY_PATHS[EntityType.DOCUMENT] = "/app/docs"  # type: ignore[index]


def test_every_template_only_uses_entity_id():
    for template in ENTITY_PATHS.values():
        assert template.format(entity_id="x")
