"""Selection of the minimum or maximum item per key."""

import operator
from typing import Any, Callable, Dict, Iterable

from grouping_by._typing import Comparator, TItem, TKey, TOut


def identity(item):
    """Returns the item unchanged."""
    return item


def min_by(
    items: Iterable[TItem],
    func: Callable[[TItem], TKey],
    comparator: Comparator[TItem],
    finisher: Callable[[TItem], TOut] = identity,
) -> Dict[TKey, TOut]:
    """Selects the smallest item of each group.

    Args:
        items: An iterable of items to be grouped.
        func: A function that generates the key used to group items.
        comparator: A function returning a negative number, zero or a positive
            number when its first argument is less than, equal to or greater than
            its second argument.
        finisher: A function applied to the selected item of each group.

    Returns:
        The finished smallest item of each group. When several items compare equal
        the earliest one is selected.
    """
    return _select_extremal(items, func, comparator, finisher, operator.lt)


def max_by(
    items: Iterable[TItem],
    func: Callable[[TItem], TKey],
    comparator: Comparator[TItem],
    finisher: Callable[[TItem], TOut] = identity,
) -> Dict[TKey, TOut]:
    """Selects the largest item of each group.

    Args:
        items: An iterable of items to be grouped.
        func: A function that generates the key used to group items.
        comparator: A function returning a negative number, zero or a positive
            number when its first argument is less than, equal to or greater than
            its second argument.
        finisher: A function applied to the selected item of each group.

    Returns:
        The finished largest item of each group. When several items compare equal
        the earliest one is selected.
    """
    return _select_extremal(items, func, comparator, finisher, operator.gt)


def compare_by(func: Callable[[TItem], Any]) -> Comparator[TItem]:
    """Returns a comparator ordering items by the results of the specified function."""

    def comparator(left: TItem, right: TItem) -> int:
        left_value, right_value = func(left), func(right)
        if left_value < right_value:
            return -1
        if left_value > right_value:
            return 1
        return 0

    return comparator


def _select_extremal(
    items: Iterable[TItem],
    func: Callable[[TItem], TKey],
    comparator: Comparator[TItem],
    finisher: Callable[[TItem], TOut],
    replaces: Callable[[int, int], bool],
) -> Dict[TKey, TOut]:
    # Only a strict improvement replaces the current best, ties keep the earliest
    best: Dict[TKey, TItem] = {}
    for item in items:
        key = func(item)
        if key not in best:
            best[key] = item
        elif replaces(comparator(item, best[key]), 0):
            best[key] = item
    return {key: finisher(item) for key, item in best.items()}
