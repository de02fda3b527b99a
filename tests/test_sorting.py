import random

import pytest

from daa_algorithms.sorting import heap_sort, heapify, merge_sort, partition, quick_sort

SAMPLES = [
    [],
    [7],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 4, 4],
    [1, 2, 3, 4, 5, 6],
    [6, 5, 4, 3, 2, 1],
    [0, -3, 12, -3, 7, 0, 99, -50],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_heap_sort_sorts_like_sorted(sample):
    assert heap_sort(sample) == sorted(sample)


@pytest.mark.parametrize("sample", SAMPLES)
def test_merge_sort_sorts_like_sorted(sample):
    assert merge_sort(sample) == sorted(sample)


@pytest.mark.parametrize("sample", SAMPLES)
def test_quick_sort_sorts_like_sorted(sample):
    assert quick_sort(sample) == sorted(sample)


def _random_data():
    rng = random.Random(42)
    return [rng.randrange(200) for _ in range(500)]


def test_heap_sort_random_input():
    data = _random_data()
    assert heap_sort(data) == sorted(data)


def test_merge_sort_random_input():
    data = _random_data()
    assert merge_sort(data) == sorted(data)


def test_quick_sort_random_input():
    data = _random_data()
    assert quick_sort(data) == sorted(data)


def test_heap_sort_leaves_input_untouched():
    data = [3, 1, 2]
    assert heap_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_merge_sort_leaves_input_untouched():
    data = [3, 1, 2]
    assert merge_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_quick_sort_leaves_input_untouched():
    data = [3, 1, 2]
    assert quick_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_heap_sort_accepts_iterables():
    assert heap_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_merge_sort_accepts_iterables():
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_quick_sort_accepts_iterables():
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_quick_sort_large_sorted_input():
    data = list(range(5000))
    assert quick_sort(data) == data


def test_heapify_restores_heap_property():
    items = [1, 9, 8, 5, 4, 7, 6]
    heapify(items, len(items), 0)
    assert items[0] == max(items)
    for parent in range(len(items)):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < len(items):
                assert items[parent] >= items[child]


def test_heapify_respects_size():
    items = [1, 2, 9]
    heapify(items, 2, 0)
    assert items == [2, 1, 9]


def test_partition_splits_around_pivot():
    items = [5, 3, 8, 1, 9, 2]
    pivot = items[0]
    index = partition(items, 0, len(items) - 1)
    assert items[index] == pivot
    assert all(x <= pivot for x in items[:index])
    assert all(x > pivot for x in items[index + 1 :])
    assert sorted(items) == [1, 2, 3, 5, 8, 9]


def test_partition_subrange_only():
    items = [100, 4, 2, 3, -1]
    index = partition(items, 1, 3)
    assert items[0] == 100 and items[4] == -1
    assert items[index] == 4