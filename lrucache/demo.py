"""Small demonstration of sharing one cache between threads."""

from __future__ import annotations

import argparse
import threading
from typing import Optional, Sequence

from lrucache.cache import LruCache


def run_demo() -> tuple[Optional[int], Optional[int]]:
    """Fill a two-item cache from two threads.

    Returns the values found afterwards for ``"banana"`` and ``"pear"``.
    """
    cache: LruCache[str, int] = LruCache(2)

    def first() -> None:
        cache.put("banana", 1)
        cache.put("pear", 2)

    def second() -> None:
        cache.put("apple", 3)

    threads = [threading.Thread(target=first), threading.Thread(target=second)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return cache.get("banana"), cache.get("pear")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lrucache-demo",
        description="Share an LRU cache between two threads and report what survives.",
    )
    parser.parse_args(argv)

    banana, pear = run_demo()
    print(f"banana: {banana!r}")
    print(f"pear:   {pear!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())