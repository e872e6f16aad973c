from discrete_algos.aho_corasick import AhoCorasick, Matching, Occurrence


def test_aho_corasick_source_case():
    patterns = ["catafalk", "taf", "cat", "dog"]
    text = "catafalk catch cat and dog said -- taf"
    expected = {
        "catafalk": Occurrence(1, [Matching(0, 1)]),
        "taf": Occurrence(2, [Matching(2, 1), Matching(35, 8)]),
        "cat": Occurrence(3, [Matching(0, 1), Matching(9, 2), Matching(15, 3)]),
        "dog": Occurrence(1, [Matching(23, 5)]),
    }
    assert AhoCorasick(patterns).find(text) == expected


def test_no_matches_gives_empty_result():
    assert AhoCorasick(["xyz"]).find("abc abc") == {}


def test_positions_point_at_pattern():
    text = "he she his hers"
    result = AhoCorasick(["she", "his"]).find(text)
    for pattern, occurrence in result.items():
        assert occurrence.count == len(occurrence.matchings)
        for matching in occurrence.matchings:
            assert text[matching.position:matching.position + len(pattern)] == pattern
    assert set(result) == {"she", "his"}


def test_word_count_follows_spaces():
    result = AhoCorasick(["ab"]).find("ab x ab")
    assert [m.word_count for m in result["ab"].matchings] == [1, 3]


def test_automaton_reusable():
    automaton = AhoCorasick(["aa"])
    first = automaton.find("aaa")
    second = automaton.find("aaa")
    assert first == second
    assert first["aa"].count == 2