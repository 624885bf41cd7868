import pytest

from algokit.searching import binary_search, linear_search

SAMPLE = [2, 3, 4, 10, 40]


@pytest.mark.parametrize("target", SAMPLE)
def test_linear_search_finds_every_element(target):
    assert linear_search(SAMPLE, target) == SAMPLE.index(target)


def test_linear_search_missing_returns_none():
    assert linear_search(SAMPLE, 99) is None


def test_linear_search_empty():
    assert linear_search([], 1) is None


def test_linear_search_returns_first_occurrence():
    assert linear_search([7, 5, 5, 5], 5) == 1


def test_linear_search_accepts_iterators():
    assert linear_search(iter(SAMPLE), 40) == len(SAMPLE) - 1


@pytest.mark.parametrize("target", SAMPLE)
def test_binary_search_finds_every_element(target):
    index = binary_search(SAMPLE, target)
    assert SAMPLE[index] == target


def test_binary_search_over_range():
    values = list(range(0, 200, 3))
    for position, value in enumerate(values):
        assert binary_search(values, value) == position


@pytest.mark.parametrize("key", [-5, 1, 5, 39, 41, 1000])
def test_binary_search_missing_returns_none(key):
    assert binary_search(SAMPLE, key) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_with_duplicates_hits_matching_value():
    values = [1, 2, 2, 2, 3]
    assert values[binary_search(values, 2)] == 2