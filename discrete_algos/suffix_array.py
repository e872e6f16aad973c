"""Suffix array with a binary-search LCP structure, built from a suffix tree."""

from __future__ import annotations

from .suffix_trie import SuffixTrie


class SuffixArray:
    """Sorted suffixes of a sentinel-terminated text, searchable by pattern."""

    def __init__(self, trie: SuffixTrie) -> None:
        self._text = trie.text
        self._suffixes: list[int] = []
        adjacent = self._collect(trie)
        adjacent.pop(0)
        n = len(self._text)
        self._lcp = [0] * (2 * n)
        self._fill_lcp(0, n - 1, adjacent)

    def _collect(self, trie: SuffixTrie) -> list[int]:
        """Walk the tree in order, recording suffixes and neighbour LCPs."""
        adjacent: list[int] = []
        common = 0
        stack = [(trie.root, 0, False)]
        while stack:
            node, total, leaving = stack.pop()
            if leaving:
                common -= node.length
                continue
            if not node.children:
                self._suffixes.append(node.suffix_start)
                adjacent.append(common)
                common = total
                continue
            stack.append((node, 0, True))
            depth = total + node.length
            for _, child in reversed(node.ordered_children()):
                stack.append((child, depth, False))
        return adjacent

    def _fill_lcp(self, low: int, high: int, adjacent: list[int]) -> int:
        if low == high:
            raise ValueError("R and L can't be equal")
        if high < low:
            low, high = high, low
        if high - low == 1:
            self._lcp[low + high - 1] = adjacent[low]
            return adjacent[low]
        mid = (low + high) // 2
        result = min(
            self._fill_lcp(low, mid, adjacent), self._fill_lcp(mid, high, adjacent)
        )
        index = low + high - 1 if (high - low) % 2 == 0 else low + high - 2
        self._lcp[index] = result
        return result

    def _lcp_at(self, low: int, high: int) -> int:
        if high < low:
            low, high = high, low
        if high - low == 1 or (low + high) % 2 == 0:
            return self._lcp[low + high - 1]
        return self._lcp[low + high - 2]

    def _char_at(self, pos: int) -> str:
        return self._text[pos] if pos < len(self._text) else ""

    def find(self, pattern: str) -> list[int]:
        """Return the start index of every occurrence of ``pattern``."""
        m = len(pattern)
        if m > len(self._text):
            return []
        sa = self._suffixes
        char = self._char_at
        low, high = 0, len(sa) - 1
        l = r = 0

        while low < high:
            while max(l, r) < m and (
                pattern[l] == char(sa[low] + l) or pattern[r] == char(sa[high] + r)
            ):
                if pattern[l] == char(sa[low] + l):
                    l += 1
                if pattern[r] == char(sa[high] + r):
                    r += 1
            if max(l, r) >= m:
                break

            state = (low, high, l, r)
            mid = (low + high) // 2
            if l == r:
                if pattern[l] > char(sa[mid] + l):
                    low = mid
                else:
                    high = mid
            elif l > r:
                k = self._lcp_at(l, mid)
                if k == l:
                    if pattern[l] > char(sa[mid] + l):
                        low = mid
                    else:
                        high, r = mid, k
                elif k < l:
                    high, r = mid, k
                else:
                    low = mid
            else:
                k = self._lcp_at(mid, r)
                if k == r:
                    if pattern[r] > char(sa[mid] + r):
                        low, l = mid, k
                    else:
                        high = mid
                elif k < r:
                    low, l = mid, k
                else:
                    high = mid
            if (low, high, l, r) == state:
                break

        position = low if l == m else high
        if not self._text.startswith(pattern, sa[position]):
            return []

        result = [sa[position]]
        i = position - 1
        while i > 0 and self._lcp_at(i, i + 1) >= m:
            result.append(sa[i])
            i -= 1
        i = position + 1
        while i < len(sa) and self._lcp_at(i - 1, i) >= m:
            result.append(sa[i])
            i += 1
        return result