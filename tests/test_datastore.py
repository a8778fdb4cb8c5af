"""Tests for the LMDB backed datastore."""

import os

import pytest

from wakectl.exceptions import DatastoreError, DatastoreLockedError
from wakectl.libraries.datastore import LmdbDatastore


class TestOpen:
    def test_creates_directory_and_empty_store(self, tmp_path):
        path = str(tmp_path / "nested" / "dir" / "store.db")

        with LmdbDatastore(path) as store:
            assert list(store.items()) == []

        assert os.path.isfile(path)

    def test_second_open_is_rejected_while_locked(self, datastore, store_path):
        other = LmdbDatastore(store_path)

        with pytest.raises(DatastoreLockedError):
            other.open()

        assert not other.opened

    def test_lock_released_on_close(self, store_path):
        first = LmdbDatastore(store_path)
        first.open()
        first.close()

        second = LmdbDatastore(store_path)
        second.open()
        second.close()

    def test_open_twice_same_instance(self, datastore):
        with pytest.raises(DatastoreError):
            datastore.open()

    def test_close_is_idempotent(self, store_path):
        store = LmdbDatastore(store_path)
        store.open()
        store.close()
        store.close()

        assert not store.opened

    def test_use_after_close(self, store_path):
        store = LmdbDatastore(store_path)
        store.open()
        store.close()

        with pytest.raises(DatastoreError):
            store.get("key")


class TestOperations:
    def test_set_get_delete(self, datastore):
        datastore.set("pc", b"value")

        assert datastore.get("pc") == b"value"
        assert datastore.delete("pc") is True
        assert datastore.get("pc") is None
        assert datastore.delete("pc") is False

    def test_get_default(self, datastore):
        assert datastore.get("missing", b"fallback") == b"fallback"

    def test_set_overwrites(self, datastore):
        datastore.set("pc", b"one")
        datastore.set("pc", b"two")

        assert datastore.get("pc") == b"two"

    def test_items_are_ordered_by_key(self, datastore):
        for key in ("b", "c", "a"):
            datastore.set(key, key.encode())

        assert list(datastore.items()) == [("a", b"a"), ("b", b"b"), ("c", b"c")]

    def test_unicode_keys(self, datastore):
        datastore.set("büro-pc", b"x")

        assert datastore.get("büro-pc") == b"x"
        assert list(datastore.items()) == [("büro-pc", b"x")]

    def test_values_persist_across_reopen(self, store_path):
        with LmdbDatastore(store_path) as store:
            store.set("pc", b"persisted")

        with LmdbDatastore(store_path) as store:
            assert store.get("pc") == b"persisted"

    def test_empty_key_is_a_miss(self, datastore):
        assert datastore.get("") is None
        assert datastore.get("", b"fallback") == b"fallback"
        assert datastore.delete("") is False
