import pytest

from discrete_algos.trie import Trie

DATA = ["123456", "sdflkjslfj12", "aaaaaaaaaxxxxxxxxxx"]


def test_insert():
    trie = Trie()
    for s in DATA:
        trie.insert(s)
    for s in DATA:
        assert trie.find(s)
    assert not trie.find("sdlfkjssdfffffflkfjslk")


def test_insert_in_place():
    trie = Trie(DATA)
    for s in DATA:
        assert trie.find(s)
    assert not trie.find("sdlfkjssdfffffflkfjslk")


def test_delete():
    data = ["", "roman", "router", "routine", "raise", "root"]
    trie = Trie(data)
    for s in data[1::2]:
        trie.remove(s)
    for s in data[1::2]:
        assert not trie.find(s)
    for s in data[0::2]:
        assert trie.find(s)


def test_prefix_is_not_member():
    trie = Trie(["router"])
    assert not trie.find("rout")
    assert "router" in trie
    assert "rout" not in trie


def test_empty_string_present_initially():
    assert Trie().find("")


def test_remove_single_chain_then_reinsert():
    trie = Trie(["abc"])
    trie.remove("abc")
    assert not trie.find("abc")
    assert not trie.find("ab")
    trie.insert("abc")
    assert trie.find("abc")


def test_remove_keeps_longer_word():
    trie = Trie(["ab", "abcd"])
    trie.remove("ab")
    assert not trie.find("ab")
    assert trie.find("abcd")


@pytest.mark.parametrize("word", ["missing", "r"])
def test_remove_absent_is_noop(word):
    trie = Trie(["roman"])
    trie.remove(word)
    assert trie.find("roman")