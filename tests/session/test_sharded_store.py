"""Tests for ShardedSessionStore."""

import pytest

from weblet.session.adapters.memory import InMemorySessionStore
from weblet.session.adapters.sharded import ShardedSessionStore
from weblet.session.ports.outbound import SessionStore
from weblet.session.session import Session


@pytest.fixture
def store() -> ShardedSessionStore:
    return ShardedSessionStore([InMemorySessionStore() for _ in range(4)])


class TestShardedSessionStore:
    def test_implements_session_store(self, store):
        assert isinstance(store, SessionStore)

    def test_requires_at_least_one_shard(self):
        with pytest.raises(ValueError):
            ShardedSessionStore([])

    def test_same_id_always_maps_to_same_shard(self, store):
        assert store.shard_for("abc") is store.shard_for("abc")

    def test_save_and_find(self, store):
        store.save(Session("abc", {"k": "v"}))
        assert store.find("abc").get("k") == "v"

    def test_session_lives_in_exactly_one_shard(self, store):
        store.save(Session("abc"))
        holders = [s for s in store.shards if not s.find("abc").is_zero()]
        assert holders == [store.shard_for("abc")]

    def test_find_all_merges_and_sorts(self, store):
        ids = [f"id-{i}" for i in range(20)]
        for sid in reversed(ids):
            store.save(Session(sid))
        assert [s.id for s in store.find_all()] == sorted(ids)

    def test_zero_session_not_saved(self, store):
        store.save(Session.zero())
        assert store.find_all() == []

    def test_delete(self, store):
        store.save(Session("abc"))
        store.delete("abc")
        store.delete("never-there")
        assert store.find("abc").is_zero()
