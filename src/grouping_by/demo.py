"""Demonstration of grouping a fixed sample of points."""

from operator import attrgetter
from typing import NamedTuple, Tuple

from grouping_by._typing import Grouping, SetGrouping
from grouping_by.grouping import group_by, group_by_as_set


class Point(NamedTuple):
    x: int
    y: int


POINTS = (
    Point(x=1, y=2),
    Point(x=1, y=3),
    Point(x=2, y=2),
    Point(x=2, y=2),
)


def run_demo() -> Tuple[Grouping[int, Point], SetGrouping[int, Point]]:
    """Returns the sample points grouped by ``x`` and uniquely grouped by ``y``."""
    by_x = group_by(POINTS, attrgetter("x"))
    by_y = group_by_as_set(POINTS, attrgetter("y"))
    return by_x, by_y
