"""Hashable records and the loading of records files."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Mapping, Union

import yaml

from grouping_by.exceptions import InvalidRecordsError, MissingFieldError

_LOGGER = logging.getLogger(__name__)


class Record(Mapping[str, Any]):
    """An immutable, hashable mapping of field names to values.

    Nested lists are stored as tuples and nested mappings as records. Field names
    are stored as text, names that collide as text (``1`` and ``"1"``) are rejected.

    Args:
        data: Field names and values of the record.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Mapping[str, Any]):
        self._data: Dict[str, Any] = {
            str(name): _freeze(value) for name, value in data.items()
        }
        if len(self._data) != len(data):
            names = sorted(repr(name) for name in data)
            raise InvalidRecordsError(
                f"Field names collide as text: {', '.join(names)}"
            )
        self._hash = hash(frozenset(self._data.items()))

    def dump(self) -> Dict[str, Any]:
        """Returns a plain dictionary representation of the record."""
        return {name: _thaw(value) for name, value in self._data.items()}

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._hash == other._hash and self._data == other._data
        return super().__eq__(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._data.items())
        return f"{self.__class__.__name__}({fields})"


def load_records(path: Union[str, Path]) -> List[Record]:
    """Loads records from a YAML (or JSON) file containing a list of mappings.

    Args:
        path: Location of the records file.

    Returns:
        The records in file order.

    Raises:
        InvalidRecordsError: The file is unreadable, is not valid YAML or is not a
            list of mappings.
    """
    path = Path(path)
    try:
        with path.open("rt") as file:
            contents = yaml.load(file, Loader=yaml.SafeLoader)
    except OSError as exception:
        raise InvalidRecordsError(f"Unable to read {path}: {exception}") from None
    except yaml.YAMLError as exception:
        raise InvalidRecordsError(f"Unable to parse {path}: {exception}") from None

    if not isinstance(contents, list):
        raise InvalidRecordsError(f"Expected a list of records in {path}")

    records = []
    for index, item in enumerate(contents):
        if not isinstance(item, Mapping):
            raise InvalidRecordsError(
                f"Expected a mapping for record {index} in {path}, got {item!r}"
            )
        records.append(Record(item))

    _LOGGER.debug("Loaded %d records from %s", len(records), path)
    return records


def field_getter(name: str) -> Callable[[Record], Any]:
    """Returns a function that extracts the specified field from a record."""

    def getter(record: Record) -> Any:
        try:
            return record[name]
        except KeyError:
            raise MissingFieldError(name, record) from None

    return getter


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return Record(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, set):
        return frozenset(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Record):
        return value.dump()
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    if isinstance(value, frozenset):
        return [_thaw(item) for item in value]
    return value
