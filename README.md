# lrucache

A small, thread-safe least-recently-used (LRU) cache.

`lrucache.cache.LruCache` holds at most `capacity` items. Reading an item
with `get` or writing one with `put` makes it the most recently used. When
a new key is added to a full cache, the least recently used item is
evicted first.

## Installation

```
pip install .
```

## Usage

```python
from lrucache.cache import LruCache

cache = LruCache(2)

cache.put("banana", 1)        # returns None: new key
cache.put("pear", 2)
cache.put("banana", 5)        # returns 1: the replaced value

cache.get("banana")           # 5, and "banana" becomes most recently used
cache.get_mru()               # 5
cache.put("apple", 3)         # cache is full: "pear" is evicted

cache.get("pear")             # None
"apple" in cache              # True
len(cache)                    # 2
cache.capacity                # 2
```

- `LruCache(capacity)` creates an empty cache; a negative capacity raises
  `ValueError`.
- `get(key)` returns the stored value and marks the key most recently
  used, or returns `None` if the key is absent.
- `get_mru()` returns the value of the most recently used item without
  changing the order, or `None` if the cache is empty.
- `put(key, value)` stores the value, makes the key most recently used,
  and returns the previous value for that key, or `None` if the key was
  new.
- `key in cache` reports whether a key is cached without changing its
  recency; `len(cache)` gives the number of cached items; the read-only
  `capacity` property gives the limit.

Because `None` signals a missing key, storing `None` as a value makes a
hit indistinguishable from a miss through `get`; use `in` when that
matters.

All operations take an internal lock, so one cache can be shared freely
between threads.

## Demo

A short demonstration starts two threads writing to a cache of capacity 2
(one puts `"banana"` then `"pear"`, the other puts `"apple"`) and prints
the values then found for `"banana"` and `"pear"`:

```
lrucache-demo
```

Which items survive depends on how the threads are scheduled. The same
demonstration is available from Python as `lrucache.demo.run_demo()`,
which returns the two values as a tuple.

## What it does not do

The cache lives in memory only: it has no persistence, no expiry by time,
no explicit removal of single items, and no statistics on hits and
misses.

## Running the tests

```
pip install ".[test]"
pytest
```