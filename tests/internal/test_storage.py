"""Tests for token and session stores."""

import json

import pytest

from custom_http._internal.storage import (
    JsonFileStore,
    MemoryStore,
    StoreSessionProvider,
    StoreTokenProvider,
)


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_missing_key_returns_none(self):
        assert MemoryStore().get_item("AuthorizationToken") is None

    def test_set_and_get(self):
        store = MemoryStore()
        store.set_item("userId", "42")
        assert store.get_item("userId") == "42"

    def test_values_are_stored_as_strings(self):
        store = MemoryStore()
        store.set_item("userId", 42)  # type: ignore[arg-type]
        assert store.get_item("userId") == "42"

    def test_remove_and_clear(self):
        store = MemoryStore({"a": "1", "b": "2"})
        store.remove_item("a")
        assert store.get_item("a") is None
        store.remove_item("missing")
        store.clear()
        assert store.get_item("b") is None

    def test_initial_items_are_copied(self):
        initial = {"a": "1"}
        store = MemoryStore(initial)
        store.set_item("a", "2")
        assert initial == {"a": "1"}


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileStore(tmp_path / "storage.json")
        assert store.get_item("AuthorizationToken") is None

    def test_set_persists_to_disk(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        JsonFileStore(path).set_item("AuthorizationToken", "abc")
        assert json.loads(path.read_text()) == {"AuthorizationToken": "abc"}
        assert JsonFileStore(path).get_item("AuthorizationToken") == "abc"

    def test_reads_changes_made_by_others(self, tmp_path):
        path = tmp_path / "storage.json"
        store = JsonFileStore(path)
        path.write_text(json.dumps({"AuthorizationToken": "fresh"}))
        assert store.get_item("AuthorizationToken") == "fresh"

    def test_remove_and_clear(self, tmp_path):
        store = JsonFileStore(tmp_path / "storage.json")
        store.set_item("a", "1")
        store.set_item("b", "2")
        store.remove_item("a")
        assert store.get_item("a") is None
        assert store.get_item("b") == "2"
        store.clear()
        assert store.get_item("b") is None

    def test_non_object_file_raises(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            JsonFileStore(path).get_item("a")


class TestProviders:
    """Tests for store-backed providers."""

    def test_token_provider_reads_authorization_token(self):
        store = MemoryStore({"AuthorizationToken": "abc"})
        assert StoreTokenProvider(store).get_token() == "abc"

    def test_token_provider_missing(self):
        assert StoreTokenProvider(MemoryStore()).get_token() is None

    def test_session_provider_reads_user_id(self):
        store = MemoryStore({"userId": "42"})
        assert StoreSessionProvider(store).get_user_id() == "42"

    def test_providers_read_on_every_call(self):
        store = MemoryStore()
        provider = StoreSessionProvider(store)
        assert provider.get_user_id() is None
        store.set_item("userId", "7")
        assert provider.get_user_id() == "7"

    def test_custom_key(self):
        store = MemoryStore({"token": "xyz"})
        assert StoreTokenProvider(store, key="token").get_token() == "xyz"
