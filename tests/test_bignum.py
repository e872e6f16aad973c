import io

import pytest

from discrete_algos.bignum import BigNumber, main

PAIRS = [
    ("0", "0"),
    ("9", "1"),
    ("999999999999", "1"),
    ("12345678912344546464", "8390573059734508734508"),
    ("100500", "100500"),
    ("7", "123456789"),
]


def test_addition():
    assert BigNumber("100000") + BigNumber("500") == BigNumber("100500")
    assert BigNumber("100500") + BigNumber("0") == BigNumber("100500")


def test_subtraction():
    assert BigNumber("101000") - BigNumber("500") == BigNumber("100500")
    assert BigNumber("100500") - BigNumber("100500") == BigNumber("0")


def test_equality():
    assert BigNumber("100500") == BigNumber("100500")
    assert not BigNumber("100500") == BigNumber("100501")


@pytest.mark.parametrize("a, b", PAIRS)
def test_operations_agree_with_int(a, b):
    x, y = BigNumber(a), BigNumber(b)
    assert str(x + y) == str(int(a) + int(b))
    assert str(x * y) == str(int(a) * int(b))
    assert (x < y) == (int(a) < int(b))
    big, small = (x, y) if int(a) >= int(b) else (y, x)
    assert str(big - small) == str(abs(int(a) - int(b)))


def test_leading_zeros_are_dropped():
    assert str(BigNumber("000123")) == "123"
    assert str(BigNumber("0000")) == "0"
    assert BigNumber("007") == BigNumber("7")


def test_negative_difference_raises():
    with pytest.raises(ValueError):
        BigNumber("5") - BigNumber("7")


@pytest.mark.parametrize("text", ["", "12a", "-5", "1.5"])
def test_invalid_text_raises(text):
    with pytest.raises(ValueError):
        BigNumber(text)


def test_hash_matches_equality():
    assert hash(BigNumber("0042")) == hash(BigNumber("42"))
    assert len({BigNumber("1"), BigNumber("01"), BigNumber("2")}) == 2


def test_main(monkeypatch, capsys):
    data = "100000 500 +\n5 7 -\n3 4 <\n100500 100500 =\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    assert capsys.readouterr().out == "100500\nerror\ntrue\ntrue\n"


def test_main_multiplication(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("123456789 987654321 *\n"))
    main([])
    assert capsys.readouterr().out == f"{123456789 * 987654321}\n"