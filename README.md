# memkv

An in-memory key-value store for string keys and values. Each store is built from four parts:

- a chained hash map that holds the data,
- a trie over the keys, used for prefix search,
- an LRU cache in front of the hash map,
- a Bloom filter that rules out missing keys quickly.

## Installation

```
pip install .
```

To run the tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Using it as a library

```python
from memkv.store import KVStore

store = KVStore(hash_map_capacity=101, cache_capacity=100,
                bloom_filter_size=1000, bloom_filter_num_hashes=3)

store.set("app_service", "running")
store.set("app_config", "loaded")

store.get("app_service")       # "running"
store.get("missing")           # "" (an absent key reads as the empty string)
store.prefix_search("app")     # ["app_config", "app_service"]
store.remove("app_config")     # True
store.remove("app_config")     # False
```

The constructor arguments shown are the defaults. `prefix_search` returns the
matching keys in character order.

`might_contain(key)` asks only the Bloom filter. A `False` answer is always
correct: the key was never set. A `True` answer may be a false positive, and a
key that has been removed can still report `True`, because a Bloom filter
cannot forget.

### Building blocks

The parts can also be used on their own:

- `memkv.hash_map.HashMap(capacity=101)`: a fixed number of buckets with
  chaining. It has `set`, `get` (returns `""` for a missing key), `remove`,
  `contains`, and supports `in` and `len()`. A capacity below 1 raises
  `ValueError`.
- `memkv.trie.Trie()`: `insert`, `search_prefix`, `remove` (prunes nodes no
  longer needed; removing the empty string returns `False`), `contains`, and
  `in`.
- `memkv.lru_cache.LRUCache(capacity)`: `get` (marks the entry as most recently
  used, returns `""` when absent), `put` (evicts the least recently used entry
  when full), `contains` (does not change recency), `remove`, `in` and `len()`.
  A capacity of 0 disables the cache; a negative capacity raises `ValueError`.
- `memkv.bloom_filter.BloomFilter(size, num_hashes)`: `add` and
  `possibly_contains`. At most three hash functions are used; asking for more
  uses all three. A filter of size 0 reports every key as absent. Negative
  arguments raise `ValueError`.
- `memkv.hashing`: the 32-bit string hashes `djb2_hash`, `sdbm_hash` and
  `multiplicative_hash`. They accept `str` (hashed as UTF-8) or `bytes`.

## Interactive shell

```
memkv
```

This prints a banner and reads one command per line from standard input,
showing a `> ` prompt. Arguments are separated by single spaces, so keys and
values cannot contain spaces.

| Command             | Effect                                                 |
|---------------------|--------------------------------------------------------|
| `SET <key> <value>` | stores a value, prints `OK`                            |
| `GET <key>`         | prints the value in double quotes, or `(nil)`          |
| `DEL <key>`         | prints `OK (deleted)` or `OK (key not found)`          |
| `PREFIX <prefix>`   | lists the matching keys, numbered from 1               |
| `BLOOM <key>`       | reports whether the key might be present               |
| `EXIT`              | prints `Exiting store.` and leaves the shell           |

The shell also ends at end of input. An unknown command, or a command with the
wrong number of arguments, prints an `ERR:` line. A blank line prints nothing.

Other code can drive the shell: `memkv.cli.execute(store, line)` runs one
command and returns its output lines, and `memkv.cli.repl(store, lines, out)`
runs a whole session over an iterable of lines, writing to a text stream.

## What it does not do

The store lives only in memory: nothing is written to disk, and all data is
lost when the process ends. There is no network server; the only interface is
the Python API and the shell on standard input and output. The hash map does
not grow, so a small capacity just makes its chains longer.