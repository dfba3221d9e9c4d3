"""Grouping, counting, extremal selection and summation of iterables by key."""

from grouping_by.exceptions import GroupingByException
from grouping_by.exceptions import IncompatibleValuesError
from grouping_by.exceptions import InvalidRecordsError
from grouping_by.exceptions import MissingFieldError
from grouping_by.exceptions import StreamConsumedError
from grouping_by.extrema import compare_by
from grouping_by.extrema import max_by
from grouping_by.extrema import min_by
from grouping_by.grouping import count_by
from grouping_by.grouping import group_by
from grouping_by.grouping import group_by_as_set
from grouping_by.stream import GroupingStream
from grouping_by.summing import sum_by

__version__ = "0.1.0"

__all__ = [
    "GroupingByException",
    "GroupingStream",
    "IncompatibleValuesError",
    "InvalidRecordsError",
    "MissingFieldError",
    "StreamConsumedError",
    "compare_by",
    "count_by",
    "group_by",
    "group_by_as_set",
    "max_by",
    "min_by",
    "sum_by",
]
