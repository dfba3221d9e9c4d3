import json
from typing import Any, Hashable, List, Mapping, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from grouping_by.records import Record


def print_output(
    output: str,
    results: Mapping[Hashable, Any],
    console: Optional[Console] = None,
    title: str = "",
) -> None:
    """Prints a result mapping in the specified output form (table or json)."""
    console = console if console else Console(quiet=False)

    if output == "table":
        _print_output_table(results, console, title)
    elif output == "json":
        _print_output_json(results, console)
    else:
        raise ValueError(f"Unknown output form: {output!r}")


def _print_output_table(
    results: Mapping[Hashable, Any], console: Console, title: str
) -> None:
    table = Table(title=title or None, show_header=True, box=box.SIMPLE)
    table.add_column(f"Key ({len(results)})")
    table.add_column("Value")

    for key in _sorted_keys(results):
        table.add_row(Text(_format_value(key)), Text(_format_value(results[key])))
    console.print(table)


def _print_output_json(results: Mapping[Hashable, Any], console: Console) -> None:
    text = json.dumps(_to_json(results), indent=4, default=str)
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _sorted_keys(results: Mapping[Hashable, Any]) -> List[Hashable]:
    try:
        return sorted(results)
    except TypeError:
        return list(results)  # mixed key types are not mutually orderable


def _format_value(value: Any) -> str:
    if isinstance(value, (set, frozenset)):
        return "{" + ", ".join(sorted(repr(item) for item in value)) + "}"
    return repr(value)


def _to_json(value: Any) -> Any:
    if isinstance(value, Record):
        return value.dump()
    if isinstance(value, Mapping):
        return {_to_json_key(key): _to_json(value[key]) for key in _sorted_keys(value)}
    if isinstance(value, (set, frozenset)):
        return sorted((_to_json(item) for item in value), key=_dumps)
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


def _to_json_key(key: Hashable) -> Any:
    if key is None or isinstance(key, (str, int, float, bool)):
        return key
    return repr(key)


def _dumps(value: Any) -> str:
    # YAML scalars such as dates are written as text
    return json.dumps(value, default=str)
