"""Bucket, counting and radix sorts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import chain


@dataclass(frozen=True)
class Item:
    """A sort key with the payload carried along with it."""

    key: int
    value: int


def bucket_sort(values: Sequence[float]) -> list[float]:
    """Return ``values`` sorted, spreading them over ``len(values)`` buckets."""
    n = len(values)
    if n == 0:
        return []
    low, high = min(values), max(values)
    delta = high - low
    if n == 1 or delta == 0:
        return list(values)

    segment = delta / (n - 1)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in values:
        index = min(int((value - low) / segment), n - 1)
        buckets[index].append(value)
    return list(chain.from_iterable(sorted(bucket) for bucket in buckets))


def counting_sort(items: Sequence[Item]) -> list[Item]:
    """Return ``items`` stably sorted by key."""
    if not items:
        return []
    low = min(item.key for item in items)
    high = max(item.key for item in items)
    buckets: list[list[Item]] = [[] for _ in range(high - low + 1)]
    for item in items:
        buckets[item.key - low].append(item)
    return list(chain.from_iterable(buckets))


class RadixSort:
    """LSD radix sort of integers, ``step`` bits per pass over ``bits`` bits."""

    def __init__(self, step: int = 1, bits: int = 64) -> None:
        if bits <= 0:
            raise ValueError("Bit width must be positive value")
        self._bits = bits
        self.step = step

    @property
    def step(self) -> int:
        return self._step

    @step.setter
    def step(self, step: int) -> None:
        if step <= 0:
            raise ValueError("Sorting step must be positive value")
        if step > self._bits:
            raise ValueError(f"Sorting step must be less than {self._bits + 1}")
        self._step = step
        self._mask = (1 << step) - 1

    def sort(self, values: Sequence[int]) -> list[int]:
        """Return ``values`` sorted.

        Digits are taken from each value's distance to the minimum, so only
        ranges that fit in ``bits`` bits come out fully ordered.
        """
        result = list(values)
        if not result:
            return result
        low = min(result)
        for offset in range(0, self._bits, self._step):
            buckets: dict[int, list[int]] = {}
            for value in result:
                digit = ((value - low) >> offset) & self._mask
                buckets.setdefault(digit, []).append(value)
            result = list(chain.from_iterable(buckets[d] for d in sorted(buckets)))
        return result