# ============================================================================
# NAMESPACE TESTS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Tests - Alias and slot bookkeeping
# PURPOSE: Verify first-writer-wins aliases and fully-qualified slots
# CREATED: 19 OCT 2026
# ============================================================================
"""
Namespace Tests

Run with:
    pytest tests/test_namespace.py -v
"""

import pytest

from core.namespace import Namespace


class TestAliases:
    """Tests for set_if_absent."""

    def test_first_writer_wins(self):
        ns = Namespace()
        assert ns.set_if_absent("db", "first") is True
        assert ns.set_if_absent("db", "second") is False
        assert ns["db"] == "first"
        assert ns.db == "first"

    def test_has_alias(self):
        ns = Namespace()
        assert ns.has_alias("db") is False
        ns.set_if_absent("db", object())
        assert ns.has_alias("db") is True

    def test_unknown_attribute_raises(self):
        ns = Namespace()
        with pytest.raises(AttributeError):
            ns.redis

    def test_aliases_is_a_copy(self):
        ns = Namespace()
        ns.set_if_absent("db", 1)
        ns.aliases["db"] = 2
        assert ns["db"] == 1


class TestSlots:
    """Tests for fully-qualified slots."""

    def test_bind_and_lookup(self):
        ns = Namespace()
        ns.bind("mysql-5.5", "a", "handle-a")
        ns.bind("mysql-5.5", "b", "handle-b")
        assert ns["mysql-5.5"] == {"a": "handle-a", "b": "handle-b"}
        assert ns.slot("mysql-5.5", "b") == "handle-b"
        assert len(ns) == 2

    def test_slot_missing(self):
        ns = Namespace()
        assert ns.slot("mysql-5.5", "a") is None
        assert ns.get("mysql-5.5") is None
        with pytest.raises(KeyError):
            ns["mysql-5.5"]

    def test_contains_and_iter(self):
        ns = Namespace()
        ns.set_if_absent("redis", 1)
        ns.bind("redis-2.6", "cache", 1)
        assert "redis" in ns
        assert "redis-2.6" in ns
        assert list(ns) == ["redis", "redis-2.6"]
