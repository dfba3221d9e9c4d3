"""Summation of item values by key."""

from typing import Callable, Dict, Iterable

from grouping_by._typing import TItem, TKey, TSum


def sum_by(
    items: Iterable[TItem],
    func: Callable[[TItem], TKey],
    value: Callable[[TItem], TSum],
    zero: Callable[[], TSum] = int,
) -> Dict[TKey, TSum]:
    """Sums item values by the results of the specified function.

    Args:
        items: An iterable of items to be summed.
        func: A function that generates the key used to group items.
        value: A function that generates the value added to the key's total.
        zero: A factory for the additive identity, called once for each new key.

    Returns:
        The left to right sum of the values of each group. Keys without items are
        absent rather than zero.
    """
    totals: Dict[TKey, TSum] = {}
    for item in items:
        key = func(item)
        if key not in totals:
            totals[key] = zero()
        totals[key] += value(item)
    return totals
