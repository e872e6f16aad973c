import random

import pytest

from discrete_algos.sorts import Item, RadixSort, bucket_sort, counting_sort


def test_bucket_sort_matches_sorted():
    rng = random.Random(7)
    values = [rng.uniform(-100.0, 100.0) for _ in range(500)]
    assert bucket_sort(values) == sorted(values)


def test_bucket_sort_leaves_input_alone():
    values = [3.5, 1.25, 2.0]
    copy = list(values)
    bucket_sort(values)
    assert values == copy


@pytest.mark.parametrize("values", [[], [4.0], [2.0, 2.0, 2.0], [1.0, 0.5]])
def test_bucket_sort_edge_cases(values):
    assert bucket_sort(values) == sorted(values)


def test_counting_sort_orders_keys():
    rng = random.Random(3)
    items = [Item(rng.randrange(20), i) for i in range(300)]
    result = counting_sort(items)
    assert [item.key for item in result] == sorted(item.key for item in items)


def test_counting_sort_is_stable():
    rng = random.Random(5)
    items = [Item(rng.randrange(5), i) for i in range(100)]
    result = counting_sort(items)
    assert result == sorted(items, key=lambda item: item.key)


def test_counting_sort_empty():
    assert counting_sort([]) == []


@pytest.mark.parametrize("step", [1, 3, 8, 16])
def test_radix_sort_matches_sorted(step):
    rng = random.Random(step)
    values = [rng.randrange(-10_000, 10_000) for _ in range(200)]
    assert RadixSort(step, 32).sort(values) == sorted(values)


def test_radix_sort_default():
    values = [5, -3, 0, 12, -3, 7]
    assert RadixSort().sort(values) == sorted(values)


def test_radix_sort_empty():
    assert RadixSort(4).sort([]) == []


def test_radix_step_must_be_positive():
    with pytest.raises(ValueError, match="positive"):
        RadixSort(0)


def test_radix_step_bounded_by_width():
    with pytest.raises(ValueError, match="less than 33"):
        RadixSort(33, 32)


def test_radix_step_setter_validates():
    sorter = RadixSort(2)
    sorter.step = 5
    assert sorter.step == 5
    with pytest.raises(ValueError):
        sorter.step = -1