from typing import Callable, Dict, List, Protocol, Set, TypeVar

TItem = TypeVar("TItem")
TKey = TypeVar("TKey")
TOut = TypeVar("TOut")
TSum = TypeVar("TSum", bound="Additive")

Comparator = Callable[[TItem, TItem], int]

Grouping = Dict[TKey, List[TItem]]
SetGrouping = Dict[TKey, Set[TItem]]
Counting = Dict[TKey, int]


class Additive(Protocol):
    """Values with an in-place (or functional) addition."""

    def __add__(self, other):
        ...
