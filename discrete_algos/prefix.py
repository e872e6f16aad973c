"""Prefix function, computed from the Z-array and by the KMP recurrence."""

from __future__ import annotations

from .zfunction import z_string


def prefix_function(s: str) -> list[int]:
    """Return the prefix function of ``s``, derived from its Z-array."""
    z = z_string(s)
    result = [0] * len(s)
    for i in range(1, len(s)):
        for j in range(z[i] - 1, -1, -1):
            if result[i + j] > 0:
                break
            result[i + j] = j + 1
    return result


def kmp(s: str) -> list[int]:
    """Return the prefix function of ``s`` by the classic KMP recurrence."""
    result = [0] * len(s)
    for i in range(1, len(s)):
        j = result[i - 1]
        while j > 0 and s[j] != s[i]:
            j = result[j - 1]
        if s[j] == s[i]:
            j += 1
        result[i] = j
    return result


def kmp_subs(s: str, sub: str, sep: str = "$") -> list[int]:
    """Return the start indexes of every occurrence of ``sub`` in ``s``.

    ``sep`` must be a character found in neither string.
    """
    prefix = prefix_function(sub + sep + s)
    return [i - 2 * len(sub) for i, value in enumerate(prefix) if value == len(sub)]