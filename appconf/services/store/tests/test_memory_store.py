from appconf.lookup.values import SystemEnv
from appconf.services.store.memory_store import MemoryConfigStore


def test_fetch_returns_value():
    store = MemoryConfigStore({"my_app": {"foo": "bar"}})
    assert store.fetch("my_app", "foo") == "bar"


def test_fetch_returns_none_for_missing_key():
    store = MemoryConfigStore({"my_app": {"foo": "bar"}})
    assert store.fetch("my_app", "nonexistent") is None


def test_fetch_returns_none_for_missing_namespace():
    store = MemoryConfigStore()
    assert store.fetch("nope", "foo") is None


def test_put_creates_namespace():
    store = MemoryConfigStore()
    store.put("my_app", "baz", SystemEnv("BAZ"))
    assert store.fetch("my_app", "baz") == SystemEnv("BAZ")
    assert store.namespaces() == ["my_app"]


def test_put_overwrites():
    store = MemoryConfigStore({"my_app": {"foo": 1}})
    store.put("my_app", "foo", 2)
    assert store.fetch("my_app", "foo") == 2


def test_entries_are_copied():
    entries = {"my_app": {"foo": "bar"}}
    store = MemoryConfigStore(entries)
    entries["my_app"]["foo"] = "changed"
    assert store.fetch("my_app", "foo") == "bar"
