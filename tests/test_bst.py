import io
import random

import pytest

from discrete_algos.bst import BinarySearchTree, main

RECORDS = [(1, "Walter"), (2, "Jesse"), (3, "Saul"), (4, "Mike")]


def test_lifecycle():
    tree = BinarySearchTree()
    assert len(tree) == 0
    for key, value in RECORDS:
        assert tree.insert(key, value)
    assert len(tree) == len(RECORDS)
    key, value = RECORDS[-1]
    assert tree.find(key) == value
    tree.clear()
    assert len(tree) == 0
    assert tree.find(key) is None


def test_duplicate_insert_is_rejected():
    tree = BinarySearchTree()
    assert tree.insert(1, "Walter")
    assert not tree.insert(1, "Jesse")
    assert tree.find(1) == "Walter"
    assert len(tree) == 1


def test_random_keys_round_trip():
    rng = random.Random(3)
    keys = rng.sample(range(-5000, 5000), 500)
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, str(key))
    assert len(tree) == len(keys)
    assert all(tree.find(key) == str(key) for key in keys)


def test_sorted_inserts_are_supported():
    tree = BinarySearchTree()
    for key in range(5000):
        tree.insert(key, key)
    assert tree.find(4999) == 4999
    assert len(tree) == 5000


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+ 1 Walter\n+ 1 Jesse\n1\n2\n- 3\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["OK", "Exists", "OK: Walter", "NoSuchWord", "NoSuchWord"]


def test_main_rejects_bad_key(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    with pytest.raises(ValueError):
        main()