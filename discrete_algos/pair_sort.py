"""Stable counting sort of (key, value) pairs read from standard input."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def counting_sort_pairs(pairs: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Return the pairs stably sorted by their non-negative integer key."""
    pairs = list(pairs)
    if not pairs:
        return []
    if any(key < 0 for key, _ in pairs):
        raise ValueError("keys must not be negative")
    buckets: list[list[tuple[int, str]]] = [[] for _ in range(max(k for k, _ in pairs) + 1)]
    for pair in pairs:
        buckets[pair[0]].append(pair)
    return [pair for bucket in buckets for pair in bucket]


def _read_pairs(tokens: list[str]) -> list[tuple[int, str]]:
    pairs = []
    for key, value in zip(tokens[::2], tokens[1::2]):
        try:
            pairs.append((int(key), value))
        except ValueError:
            break
    return pairs


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``key value`` pairs from stdin and print them sorted by key."""
    pairs = _read_pairs(sys.stdin.read().split())
    for key, value in counting_sort_pairs(pairs):
        print(f"{key} {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())