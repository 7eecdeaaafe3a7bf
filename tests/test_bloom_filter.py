import pytest

from memkv.bloom_filter import BloomFilter


def test_added_key_possibly_contained():
    bloom = BloomFilter(100, 3)
    bloom.add("apple")
    assert bloom.possibly_contains("apple") is True


def test_add_multiple_keys():
    bloom = BloomFilter(100, 3)
    bloom.add("apple")
    bloom.add("banana")
    bloom.add("cherry")
    assert bloom.possibly_contains("banana") is True
    assert bloom.possibly_contains("cherry") is True
    assert bloom.possibly_contains("apple") is True


def test_empty_filter_contains_nothing():
    bloom = BloomFilter(100, 3)
    for key in ["apple", "banana", "date", ""]:
        assert bloom.possibly_contains(key) is False


def test_zero_size_never_contains():
    bloom = BloomFilter(0, 3)
    bloom.add("apple")
    assert bloom.possibly_contains("apple") is False


def test_no_hash_functions_reports_everything_present():
    bloom = BloomFilter(10, 0)
    assert bloom.possibly_contains("anything") is True


@pytest.mark.parametrize("num_hashes", [1, 2, 3, 7])
def test_no_false_negatives(num_hashes):
    bloom = BloomFilter(50, num_hashes)
    keys = [f"key{i}" for i in range(30)]
    for key in keys:
        bloom.add(key)
    assert all(bloom.possibly_contains(key) for key in keys)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BloomFilter(-1, 3)