import pytest

from memkv.store import KVStore


@pytest.fixture
def store():
    return KVStore(10, 2, 100, 3)


def test_set_and_get(store):
    store.set("fruit1", "apple")
    assert store.get("fruit1") == "apple"


def test_get_unknown_key(store):
    store.set("fruit1", "apple")
    assert store.get("unknown_key") == ""
    assert store.might_contain("unknown_key") is False


def test_lru_behaviour_keeps_values(store):
    store.set("fruit1", "apple")
    store.set("fruit2", "banana")
    store.get("fruit1")
    store.set("fruit3", "cherry")
    assert store.get("fruit3") == "cherry"
    assert store.get("fruit1") == "apple"
    assert store.get("fruit2") == "banana"


def test_prefix_search(store):
    store.set("fruit1", "apple")
    store.set("app_service", "running")
    store.set("app_config", "loaded")
    assert sorted(store.prefix_search("app")) == ["app_config", "app_service"]


def test_remove_key(store):
    store.set("fruit1", "apple")
    store.set("fruit2", "banana")
    assert store.remove("fruit1") is True
    assert store.get("fruit1") == ""
    assert store.prefix_search("fruit") == ["fruit2"]


def test_remove_unknown_key(store):
    assert store.remove("missing") is False


def test_remove_twice(store):
    store.set("k", "v")
    assert store.remove("k") is True
    assert store.remove("k") is False


def test_update_value(store):
    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"
    assert store.prefix_search("k") == ["k"]


def test_empty_value_round_trip(store):
    store.set("empty", "")
    assert store.get("empty") == ""
    assert store.might_contain("empty") is True
    assert store.remove("empty") is True


def test_works_without_cache():
    store = KVStore(cache_capacity=0)
    store.set("a", "1")
    store.set("b", "2")
    assert store.get("a") == "1"
    assert store.get("b") == "2"


def test_many_keys_beyond_cache_capacity(store):
    pairs = {f"key{i}": f"value{i}" for i in range(25)}
    for key, value in pairs.items():
        store.set(key, value)
    assert {key: store.get(key) for key in pairs} == pairs