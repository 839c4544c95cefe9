# File: tests/unit/test_store.py
"""
Unit tests for the generic record store.
"""

import pytest

from vasa.core.exceptions import RecordNotFound
from vasa.core.store import RecordStore
from vasa.models import Client, Note


@pytest.fixture
def store():
    return RecordStore("client")


class TestRecordStore:
    """CRUD round trips and ordering."""

    def test_create_then_get(self, store):
        """Test a created record can be read back."""
        original = Client(name="Acme Corp", email="client@acme.com")

        stored = store.create(original)

        assert stored.id
        assert original.id == ""  # caller's record untouched
        fetched = store.get(stored.id)
        assert fetched == stored
        assert fetched.name == original.name
        assert fetched.email == original.email

    def test_update_reflects_patch_and_keeps_id(self, store):
        """Test updates apply the patch only."""
        stored = store.create(Client(name="Acme Corp", email="client@acme.com"))

        updated = store.update(stored.id, email="billing@acme.com", id="hijack")

        assert updated.id == stored.id
        assert store.get(stored.id).email == "billing@acme.com"
        assert store.get(stored.id).name == "Acme Corp"
        assert store.get("hijack") is None

    def test_delete_then_get_returns_none(self, store):
        """Test deleted records are gone."""
        stored = store.create(Client(name="Acme Corp", email="client@acme.com"))

        assert store.delete(stored.id) is True
        assert store.get(stored.id) is None
        assert store.delete(stored.id) is False

    def test_unknown_id_errors(self, store):
        """Test unknown ids raise RecordNotFound."""
        with pytest.raises(RecordNotFound, match="client not found"):
            store.update("nope", name="x")
        with pytest.raises(RecordNotFound):
            store.require("nope")
        with pytest.raises(KeyError):
            store.replace("nope", Client(name="a", email="b"))

    def test_insertion_order(self, store):
        """Test default store order."""
        for name in ("one", "two", "three"):
            store.create(Client(name=name, email=f"{name}@x.io"))

        assert [c.name for c in store.list()] == ["one", "two", "three"]
        assert len(store) == 3

    def test_newest_first(self):
        """Test newest-first store order."""
        notes = RecordStore("note", newest_first=True)
        for content in ("one", "two", "three"):
            notes.create(Note(content=content))

        assert [n.content for n in notes] == ["three", "two", "one"]

    def test_filter_and_contains(self, store):
        """Test filtering and membership."""
        kept = store.create(Client(name="Acme", email="a@acme.com", status="paused"))
        store.create(Client(name="Beta", email="b@beta.io"))

        assert store.filter(lambda c: c.status.value == "paused") == [kept]
        assert kept.id in store
        assert "missing" not in store

    def test_custom_id_factory(self):
        """Test a custom id source."""
        counter = iter(range(1, 100))
        notes = RecordStore("note", id_factory=lambda: f"n{next(counter)}")

        assert notes.create(Note(content="a")).id == "n1"
        assert notes.create(Note(content="b")).id == "n2"

    def test_iteration_is_a_snapshot(self, store):
        """Test iterating while deleting."""
        first = store.create(Client(name="A", email="a@x.io"))
        store.create(Client(name="B", email="b@x.io"))

        for client in store:
            store.delete(client.id)

        assert len(store) == 0
        assert store.get(first.id) is None
