import pytest

from grouping_by import count_by, group_by, group_by_as_set


def test_group_by_keeps_arrival_order(points):
    assert group_by(points, lambda point: point.x) == {
        1: [(1, 2), (1, 3)],
        2: [(2, 2), (2, 2)],
    }


def test_group_by_number_magnitude(numbers):
    assert group_by(numbers, abs) == {1: [-1, 1], 2: [-2, 2]}


def test_group_by_as_set_collapses_duplicates(points):
    assert group_by_as_set(points, lambda point: point.y) == {
        2: {(1, 2), (2, 2)},
        3: {(1, 3)},
    }


def test_group_by_as_set_keeps_distinct_items(points):
    assert group_by_as_set(points, lambda point: point.x) == {
        1: {(1, 2), (1, 3)},
        2: {(2, 2)},
    }


def test_group_by_as_set_number_magnitude(numbers):
    assert group_by_as_set(numbers, abs) == {1: {1, -1}, 2: {2, -2}}


def test_count_by_number_magnitude(numbers):
    assert count_by(numbers, abs) == {1: 2, 2: 2}


def test_count_by_identity():
    assert count_by([1, 2, 2, 3, 4], lambda number: number) == {1: 1, 2: 2, 3: 1, 4: 1}


def test_count_by_identity_of_points(points):
    assert count_by(points, lambda point: point) == {(1, 2): 1, (1, 3): 1, (2, 2): 2}


@pytest.mark.parametrize(
    "items, func",
    [
        ([], abs),
        ([-1, -2, 1, 2, 3, -3, 3], abs),
        (list(range(50)), lambda number: number % 7),
        (["apple", "avocado", "banana", "cherry", "blueberry"], lambda word: word[0]),
    ],
)
def test_every_item_lands_in_exactly_one_group(items, func):
    grouping = group_by(items, func)
    assert sum(len(group) for group in grouping.values()) == len(items)
    assert sorted(item for group in grouping.values() for item in group) == sorted(items)
    for key, group in grouping.items():
        assert group
        assert all(func(item) == key for item in group)


@pytest.mark.parametrize(
    "items, func",
    [
        ([-1, -2, 1, 2, 3, -3, 3], abs),
        (list(range(50)), lambda number: number % 7),
        ([1, 1, 1, 2], lambda number: "same"),
    ],
)
def test_count_by_matches_group_sizes(items, func):
    grouping = group_by(items, func)
    assert count_by(items, func) == {key: len(group) for key, group in grouping.items()}


@pytest.mark.parametrize(
    "items, duplicates",
    [
        ([1, 2, 3, 4], False),
        ([1, 1, 2, 3], True),
        (["a", "b", "a"], True),
    ],
)
def test_group_by_as_set_is_never_larger_than_group(items, duplicates):
    grouping = group_by(items, lambda item: "key")
    unique = group_by_as_set(items, lambda item: "key")
    assert len(unique["key"]) <= len(grouping["key"])
    assert (len(unique["key"]) < len(grouping["key"])) == duplicates


def test_groupings_accept_iterators():
    assert group_by((number for number in range(6)), lambda n: n % 2) == {
        0: [0, 2, 4],
        1: [1, 3, 5],
    }
    assert count_by(iter("mississippi"), lambda letter: letter) == {
        "m": 1,
        "i": 4,
        "s": 4,
        "p": 2,
    }


def test_missing_key_is_not_inserted(points):
    grouping = group_by(points, lambda point: point.x)
    with pytest.raises(KeyError):
        grouping[3]
    assert 3 not in grouping


def test_key_function_errors_propagate():
    def key(number):
        if number == 3:
            raise ValueError("three")
        return number

    with pytest.raises(ValueError, match="three"):
        group_by([1, 2, 3], key)


def test_group_by_as_set_requires_hashable_items():
    with pytest.raises(TypeError):
        group_by_as_set([[1], [2]], len)
