"""Z-function of a string and substring search built on it."""

from __future__ import annotations


def z_string(s: str) -> list[int]:
    """Return the Z-array of ``s``; ``z[0]`` is always 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        length = max(0, min(right - i, z[i - left]))
        while i + length < n and s[length] == s[i + length]:
            length += 1
        z[i] = length
        if i + length > right:
            left, right = i, i + length
    return z


def z_string_subs(s: str, sub: str, sep: str = "3") -> list[int]:
    """Return the start indexes of every occurrence of ``sub`` in ``s``.

    ``sep`` must be a character found in neither string.
    """
    z = z_string(sub + sep + s)
    offset = len(sub) + 1
    return [i - offset for i, value in enumerate(z) if value == len(sub)]