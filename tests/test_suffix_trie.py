import pytest

from discrete_algos.suffix_trie import SuffixTrie

TEXT = "AABAABCAABCD$"


def test_source_case():
    trie = SuffixTrie(TEXT)
    assert sorted(trie.find("AB")) == [1, 4, 8]


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("A", [0, 1, 3, 4, 7, 8]),
        ("B", [2, 5, 9]),
        ("C", [6, 10]),
        ("D", [11]),
        ("AABC", [3, 7]),
        ("X", []),
        ("AC", []),
    ],
)
def test_find_patterns(pattern, expected):
    assert sorted(SuffixTrie(TEXT).find(pattern)) == expected


def test_every_substring_is_found_everywhere():
    trie = SuffixTrie(TEXT)
    body = TEXT[:-1]
    for length in range(1, 5):
        for start in range(len(body) - length + 1):
            sub = body[start:start + length]
            occurrences = [i for i in range(len(TEXT)) if TEXT.startswith(sub, i)]
            assert sorted(trie.find(sub)) == occurrences


def test_empty_pattern_reaches_every_suffix():
    trie = SuffixTrie(TEXT)
    assert sorted(trie.find("")) == list(range(len(TEXT)))


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_find_min_slice_is_least(size):
    trie = SuffixTrie(TEXT)
    start = trie.find_min_slice(size)
    body = TEXT[:-1]
    least = min(body[i:i + size] for i in range(len(body) - size + 1))
    assert TEXT[start:start + size] == least


def test_render_starts_with_root():
    lines = SuffixTrie(TEXT).render().splitlines()
    assert lines[0] == "; link: none"
    assert any(line.startswith("$ : ") for line in lines)


def test_empty_text_rejected():
    with pytest.raises(ValueError):
        SuffixTrie("")