"""
Tests for the in-memory session registry.
"""

import pytest

from woocommerce_mcp.services.session_service import SessionRegistry, generate_session_id


def test_generated_ids_are_unique():
    ids = {generate_session_id() for _ in range(100)}
    assert len(ids) == 100


def test_create_get_remove():
    registry = SessionRegistry()

    session_id = registry.create("context-a")

    assert session_id in registry
    assert registry.get(session_id) == "context-a"
    assert len(registry) == 1

    assert registry.remove(session_id) == "context-a"
    assert session_id not in registry
    assert registry.get(session_id) is None
    assert len(registry) == 0


def test_missing_or_unknown_ids_resolve_to_none():
    registry = SessionRegistry()
    registry.create("context")

    assert registry.get(None) is None
    assert registry.get("") is None
    assert registry.get("no-such-session") is None


def test_new_id_skips_active_sessions():
    ids = iter(["dup", "dup", "fresh"])
    registry = SessionRegistry(id_generator=lambda: next(ids))

    first = registry.create("a")
    second = registry.create("b")

    assert first == "dup"
    assert second == "fresh"
    assert registry.session_ids() == ["dup", "fresh"]


def test_register_rejects_active_id():
    registry = SessionRegistry()
    registry.register("abc", "first")

    with pytest.raises(KeyError):
        registry.register("abc", "second")
    assert registry.get("abc") == "first"


def test_remove_unknown_is_ignored():
    registry = SessionRegistry()
    assert registry.remove("ghost") is None


def test_removed_id_can_be_reused():
    registry = SessionRegistry()
    registry.register("abc", "first")
    registry.remove("abc")

    registry.register("abc", "second")

    assert registry.get("abc") == "second"
