"""Functions for the generic grouping and counting of items."""

from collections import defaultdict
from typing import Callable, Iterable

from grouping_by._typing import Counting, Grouping, SetGrouping, TItem, TKey


def group_by(
    items: Iterable[TItem], func: Callable[[TItem], TKey]
) -> Grouping[TKey, TItem]:
    """Groups items by the results of the specified function.

    Args:
        items: An iterable of items to be grouped.
        func: A function that generates the key used to group items.

    Returns:
        The original items grouped by the results of the specified function. Items
        sharing a key keep their relative order of arrival.
    """
    grouping = defaultdict(list)
    for item in items:
        key = func(item)
        grouping[key].append(item)
    return dict(grouping)


def group_by_as_set(
    items: Iterable[TItem], func: Callable[[TItem], TKey]
) -> SetGrouping[TKey, TItem]:
    """Groups unique items by the results of the specified function.

    Args:
        items: An iterable of hashable items to be grouped.
        func: A function that generates the key used to group items.

    Returns:
        The original items grouped by the results of the specified function. Equal
        items sharing a key are collapsed into a single entry.
    """
    grouping = defaultdict(set)
    for item in items:
        key = func(item)
        grouping[key].add(item)
    return dict(grouping)


def count_by(
    items: Iterable[TItem], func: Callable[[TItem], TKey]
) -> Counting[TKey]:
    """Counts items by the results of the specified function.

    Args:
        items: An iterable of items to be counted.
        func: A function that generates the key used to count items.

    Returns:
        The number of items that produced each key.
    """
    counting = defaultdict(int)
    for item in items:
        key = func(item)
        counting[key] += 1
    return dict(counting)
