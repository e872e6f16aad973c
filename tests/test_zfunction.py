import pytest

from discrete_algos.zfunction import z_string, z_string_subs


def test_z_string_building():
    s = "abacabacabadabadatadaba"
    expected = [0, 0, 1, 0, 7, 0, 1, 0, 3, 0, 1, 0, 3, 0, 1, 0, 1, 0, 1, 0, 3, 0, 1]
    assert z_string(s) == expected


def test_z_string_substrings():
    s = "abacabacabadabadatadaba"
    assert z_string_subs(s, "aba") == [0, 4, 8, 12, 20]


def test_z_string_empty():
    assert z_string("") == []


@pytest.mark.parametrize("s", ["aaaa", "abcabcab", "mississippi", "x"])
def test_z_values_are_common_prefixes(s):
    z = z_string(s)
    assert len(z) == len(s)
    for i in range(1, len(s)):
        length = z[i]
        assert s[i:i + length] == s[:length]
        if i + length < len(s):
            assert s[i + length] != s[length]


def test_z_string_subs_matches_str_find():
    s = "banana bandana"
    sub = "ana"
    expected = [i for i in range(len(s)) if s.startswith(sub, i)]
    assert z_string_subs(s, sub, "#") == expected


def test_z_string_subs_no_match():
    assert z_string_subs("abcdef", "xyz") == []