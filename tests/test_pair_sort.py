import io
import random

import pytest

from discrete_algos.pair_sort import counting_sort_pairs, main


def test_sort_is_stable_and_ordered():
    rng = random.Random(11)
    pairs = [(rng.randrange(10), f"v{i}") for i in range(200)]
    assert counting_sort_pairs(pairs) == sorted(pairs, key=lambda pair: pair[0])


def test_empty():
    assert counting_sort_pairs([]) == []


def test_negative_key_rejected():
    with pytest.raises(ValueError):
        counting_sort_pairs([(1, "a"), (-2, "b")])


def test_result_is_permutation():
    pairs = [(3, "x"), (0, "y"), (3, "z"), (1, "w")]
    result = counting_sort_pairs(pairs)
    assert sorted(result) == sorted(pairs)


def test_main_prints_sorted_pairs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 c\n1 a\n3 d\n2 b\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 a\n2 b\n3 c\n3 d\n"


def test_main_stops_at_bad_key(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 b\n1 a\nxx y\n0 z\n"))
    main([])
    assert capsys.readouterr().out.splitlines() == ["1 a", "2 b"]