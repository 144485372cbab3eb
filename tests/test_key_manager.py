import time
from datetime import timedelta

import pytest

from keyden.commons import KeyMaterial, KeyStore, KeyStoreError
from keyden.key_manager import KeyManager
from keyden.utils import CHARSET


class MemoryStore(KeyStore):
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.writes = 0

    def read_keys(self):
        return list(self.keys)

    def write_keys(self, keys):
        self.keys = list(keys)
        self.writes += 1


class FailingStore(KeyStore):
    def read_keys(self):
        raise KeyStoreError("Other error: broken")

    def write_keys(self, keys):
        raise KeyStoreError("Other error: broken")


def _key(kid, created=1234567890):
    return KeyMaterial(kid=kid, secret="secret", created_at_unix=created)


def test_loads_keys_from_store():
    store = MemoryStore([_key("a"), _key("b")])
    manager = KeyManager(store)
    assert [k.kid for k in manager.list_keys()] == ["a", "b"]


def test_default_config():
    manager = KeyManager(MemoryStore())
    assert manager.config.size == 128
    assert manager.config.count == 1
    assert manager.config.ttl_secs == 86400
    assert manager.config.reload_interval == timedelta(seconds=30)


def test_get_key():
    a = _key("a")
    manager = KeyManager(MemoryStore([a, _key("b")]))
    assert manager.get_key("a") == a
    assert manager.get_key("missing") is None


def test_current_key_is_last():
    b = _key("b")
    manager = KeyManager(MemoryStore([_key("a"), b]))
    assert manager.current_key() == b


def test_current_key_empty():
    assert KeyManager(MemoryStore()).current_key() is None


def test_store_error_propagates_on_init():
    with pytest.raises(KeyStoreError):
        KeyManager(FailingStore())


def test_generate_key_not_saved_until_save():
    store = MemoryStore()
    manager = KeyManager(store, size=24)
    before = int(time.time())
    key = manager.generate_key("new")
    after = int(time.time())
    assert key.kid == "new"
    assert len(key.secret) == 24
    assert all(c in CHARSET for c in key.secret)
    assert before <= key.created_at_unix <= after
    assert manager.current_key() == key
    assert store.keys == []
    manager.save_keys()
    assert store.keys == [key]


def test_generate_key_replaces_existing_kid_in_place():
    manager = KeyManager(MemoryStore([_key("a"), _key("b")]))
    replaced = manager.generate_key("a")
    assert [k.kid for k in manager.list_keys()] == ["a", "b"]
    assert manager.get_key("a") == replaced


def test_rotate_on_empty_store_generates_and_saves():
    store = MemoryStore()
    manager = KeyManager(store, size=16)
    assert manager.rotate_keys() is True
    assert len(store.keys) == 1
    assert store.keys[0].kid.startswith("key-")
    assert len(store.keys[0].secret) == 16
    assert manager.current_key() == store.keys[0]


def test_rotate_not_needed():
    store = MemoryStore([_key("a")])
    manager = KeyManager(store)
    assert manager.rotate_keys() is False
    assert store.writes == 0


def test_rotate_respects_count():
    store = MemoryStore([_key("a")])
    manager = KeyManager(store, count=2)
    assert manager.rotate_keys() is True
    assert len(store.keys) == 2
    assert manager.rotate_keys() is False


def test_can_reload():
    assert KeyManager(MemoryStore(), reload_interval=timedelta(hours=1)).can_reload() is False
    assert KeyManager(MemoryStore(), reload_interval=timedelta(0)).can_reload() is True


def test_reload_picks_up_changes_when_due():
    store = MemoryStore([_key("a")])
    manager = KeyManager(store, reload_interval=timedelta(0))
    store.keys = [_key("z")]
    manager.reload()
    assert [k.kid for k in manager.list_keys()] == ["z"]


def test_reload_skipped_before_interval():
    store = MemoryStore([_key("a")])
    manager = KeyManager(store, reload_interval=timedelta(hours=1))
    store.keys = [_key("z")]
    manager.reload()
    assert [k.kid for k in manager.list_keys()] == ["a"]


def test_generate_temp_key():
    before = int(time.time())
    key = KeyManager.generate_temp_key(40)
    after = int(time.time())
    assert len(key.secret) == 40
    assert key.kid == f"temp-{key.created_at_unix}"
    assert before <= key.created_at_unix <= after