"""Rabin-Karp substring search with a rolling hash."""

from __future__ import annotations

from collections.abc import Sequence

BASE = 2048
PRIME = 2047  # 2 ** 11 - 1

_EXAMPLES = [
    ("GEEKS FOR GEEKS", "GEEKS"),
    ("baobab and catdogcatcat together cat", "cat"),
]


def modular_exponentiation(num: int, power: int, mod: int) -> int:
    """Return ``num ** power % mod`` by repeated squaring (1 when ``power`` is 0)."""
    result = 1
    while power > 0:
        if power & 1:
            result = result * num % mod
        power //= 2
        num = num * num % mod
    return result


def strstr_rk(text: str, pattern: str, start_pos: int = 0) -> int:
    """Return the first index at or after ``start_pos`` where ``pattern`` occurs, or -1."""
    n, m = len(text), len(pattern)
    if m > n or n - start_pos < m:
        return -1

    max_power = modular_exponentiation(BASE, m - 1, PRIME) if m else 1
    text_hash = pattern_hash = 0
    for t, p in zip(text[start_pos:start_pos + m], pattern):
        text_hash = (text_hash * BASE + ord(t)) % PRIME
        pattern_hash = (pattern_hash * BASE + ord(p)) % PRIME

    for i in range(start_pos, n - m + 1):
        if text_hash == pattern_hash and text[i:i + m] == pattern:
            return i
        if i < n - m:
            text_hash = ((text_hash - ord(text[i]) * max_power) * BASE + ord(text[i + m])) % PRIME
    return -1


def find_all(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, overlaps included."""
    positions = []
    pos = strstr_rk(text, pattern)
    while pos != -1:
        positions.append(pos)
        pos = strstr_rk(text, pattern, pos + 1)
    return positions


def main(argv: Sequence[str] | None = None) -> int:
    """Print the occurrences found in the built-in examples."""
    for text, pattern in _EXAMPLES:
        print(f"Try to find [{pattern}] in text [{text}]")
        for pos in find_all(text, pattern):
            print(f"Found {pattern} at position {pos}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())