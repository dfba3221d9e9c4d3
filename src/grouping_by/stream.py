from typing import Callable, Dict, Iterable, Iterator

from grouping_by import extrema
from grouping_by import grouping
from grouping_by import summing
from grouping_by._typing import (
    Comparator,
    Counting,
    Grouping,
    SetGrouping,
    TItem,
    TKey,
    TOut,
    TSum,
)
from grouping_by.exceptions import StreamConsumedError


class GroupingStream(Iterator[TItem]):
    """A consume-once stream of items with grouping terminal operations.

    Args:
        items: Items in the stream.
    """

    def __init__(self, items: Iterable[TItem]):
        self._items = iter(items)
        self._consumed = False

    @property
    def consumed(self) -> bool:
        """True once a terminal operation has consumed the stream."""
        return self._consumed

    def group_by(self, func: Callable[[TItem], TKey]) -> Grouping[TKey, TItem]:
        """Groups the remaining items, see ``grouping_by.group_by``."""
        return grouping.group_by(self._consume(), func)

    def group_by_as_set(
        self, func: Callable[[TItem], TKey]
    ) -> SetGrouping[TKey, TItem]:
        """Groups the remaining unique items, see ``grouping_by.group_by_as_set``."""
        return grouping.group_by_as_set(self._consume(), func)

    def count_by(self, func: Callable[[TItem], TKey]) -> Counting[TKey]:
        """Counts the remaining items, see ``grouping_by.count_by``."""
        return grouping.count_by(self._consume(), func)

    def min_by(
        self,
        func: Callable[[TItem], TKey],
        comparator: Comparator[TItem],
        finisher: Callable[[TItem], TOut] = extrema.identity,
    ) -> Dict[TKey, TOut]:
        """Selects the smallest remaining items, see ``grouping_by.min_by``."""
        return extrema.min_by(self._consume(), func, comparator, finisher)

    def max_by(
        self,
        func: Callable[[TItem], TKey],
        comparator: Comparator[TItem],
        finisher: Callable[[TItem], TOut] = extrema.identity,
    ) -> Dict[TKey, TOut]:
        """Selects the largest remaining items, see ``grouping_by.max_by``."""
        return extrema.max_by(self._consume(), func, comparator, finisher)

    def sum_by(
        self,
        func: Callable[[TItem], TKey],
        value: Callable[[TItem], TSum],
        zero: Callable[[], TSum] = int,
    ) -> Dict[TKey, TSum]:
        """Sums the values of the remaining items, see ``grouping_by.sum_by``."""
        return summing.sum_by(self._consume(), func, value, zero)

    def _consume(self) -> Iterator[TItem]:
        if self._consumed:
            raise StreamConsumedError()
        self._consumed = True
        return self._items

    def __iter__(self) -> Iterator[TItem]:
        return self

    def __next__(self) -> TItem:
        if self._consumed:
            raise StreamConsumedError()
        return next(self._items)
