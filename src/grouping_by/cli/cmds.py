import logging
import sys
from typing import TYPE_CHECKING, Any, Callable, List, Optional

import pydantic
from rich.console import Console

import grouping_by as api
from grouping_by import GroupingByException
from grouping_by import IncompatibleValuesError
from grouping_by import __version__
from grouping_by.cli.params import compare_option
from grouping_by.cli.params import configuration_option
from grouping_by.cli.params import debug_option
from grouping_by.cli.params import key_option
from grouping_by.cli.params import output_option
from grouping_by.cli.params import quiet_option
from grouping_by.cli.params import records_argument
from grouping_by.cli.params import select_option
from grouping_by.cli.params import value_option
from grouping_by.cli.state import AppState
from grouping_by.cli.state import pass_state
from grouping_by.demo import run_demo
from grouping_by.extrema import identity
from grouping_by.output import print_output
from grouping_by.records import Record
from grouping_by.records import field_getter
from grouping_by.records import load_records

# mypy has issues with the dynamic nature of rich-click
if TYPE_CHECKING:  # pragma: no cover
    import click
else:
    import rich_click as click

    click.rich_click.MAX_WIDTH = 120
    click.rich_click.STYLE_ERRORS_PANEL_BORDER = "bold red"
    click.rich_click.STYLE_OPTIONS_TABLE_BOX = "SIMPLE"
    click.rich_click.STYLE_REQUIRED_LONG = "bold red"
    click.rich_click.STYLE_REQUIRED_SHORT = "bold red"

logger = logging.getLogger(__name__)


# Root command
@click.group()
@click.version_option(prog_name="grouping-by", version=__version__)
def app():
    """Group, count, select and sum records by the value of a field."""
    pass


# Sub-command: group
@app.command(short_help="Group records by the value of a field.")
@records_argument
@key_option
@click.option(
    "--as-set",
    "as_set",
    is_flag=True,
    default=False,
    help="Collapse duplicate records within each group.",
)
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
@pydantic.validate_call
def group(state: AppState, as_set: bool):
    """Group the records of the RECORDS file by the value of the key field.

    - Records within a group keep the order of the RECORDS file

    - Duplicate records within a group are collapsed with --as-set
    """
    console = Console(quiet=state.quiet)
    try:
        records = _load_records(state)
        key = field_getter(_require(state.key, "--key"))
        if as_set:
            results = _collect(api.group_by_as_set, records, key)
        else:
            results = _collect(api.group_by, records, key)
        print_output(state.output, results, console=console)
    except GroupingByException as exception:
        _process_application_exception(exception)


# Sub-command: count
@app.command(short_help="Count records by the value of a field.")
@records_argument
@key_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
@pydantic.validate_call
def count(state: AppState):
    """Count the records of the RECORDS file by the value of the key field."""
    console = Console(quiet=state.quiet)
    try:
        records = _load_records(state)
        key = field_getter(_require(state.key, "--key"))
        results = _collect(api.count_by, records, key)
        print_output(state.output, results, console=console)
    except GroupingByException as exception:
        _process_application_exception(exception)


# Sub-command: min
@app.command("min", short_help="Select the smallest record of each group.")
@records_argument
@key_option
@compare_option
@select_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
@pydantic.validate_call
def minimum(state: AppState):
    """Select the record with the smallest compare field in each group of the
    RECORDS file.

    - Ties are resolved in favor of the earliest record of the RECORDS file

    - Only the select field of the selected record is reported with --select
    """
    _run_extremal(state, api.min_by)


# Sub-command: max
@app.command("max", short_help="Select the largest record of each group.")
@records_argument
@key_option
@compare_option
@select_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
@pydantic.validate_call
def maximum(state: AppState):
    """Select the record with the largest compare field in each group of the
    RECORDS file.

    - Ties are resolved in favor of the earliest record of the RECORDS file

    - Only the select field of the selected record is reported with --select
    """
    _run_extremal(state, api.max_by)


# Sub-command: sum
@app.command("sum", short_help="Sum a field of the records of each group.")
@records_argument
@key_option
@value_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
@pydantic.validate_call
def summation(state: AppState):
    """Sum the value field of the records of each group of the RECORDS file."""
    console = Console(quiet=state.quiet)
    try:
        records = _load_records(state)
        key = field_getter(_require(state.key, "--key"))
        value = field_getter(_require(state.value, "--value"))
        results = _collect(api.sum_by, records, key, value)
        print_output(state.output, results, console=console)
    except GroupingByException as exception:
        _process_application_exception(exception)


# Sub-command: demo
@app.command(short_help="Group a fixed sample of points.")
@output_option
@quiet_option
@pass_state
@pydantic.validate_call
def demo(state: AppState):
    """Group a fixed sample of points by x, and uniquely by y."""
    console = Console(quiet=state.quiet)
    by_x, by_y = run_demo()
    if state.output == "json":
        print_output("json", {"group_by": by_x, "group_by_as_set": by_y}, console)
    else:
        print_output("table", by_x, console=console, title="group_by(x)")
        print_output("table", by_y, console=console, title="group_by_as_set(y)")


def _run_extremal(state: AppState, select: Callable) -> None:
    console = Console(quiet=state.quiet)
    try:
        records = _load_records(state)
        key = field_getter(_require(state.key, "--key"))
        comparator = api.compare_by(field_getter(_require(state.compare, "--compare")))
        finisher: Callable[[Record], Any] = (
            field_getter(state.select) if state.select else identity
        )
        results = _collect(select, records, key, comparator, finisher)
        print_output(state.output, results, console=console)
    except GroupingByException as exception:
        _process_application_exception(exception)


def _collect(collector: Callable, records: List[Record], *functions: Callable) -> Any:
    try:
        return collector(records, *functions)
    except TypeError as exception:
        raise IncompatibleValuesError(
            f"Unable to combine field values: {exception}"
        ) from exception


def _load_records(state: AppState) -> List[Record]:
    path = _require(state.records, "RECORDS")
    records = load_records(path)
    logger.debug("Grouping %d records by %r", len(records), state.key)
    return records


def _require(value: Optional[str], name: str) -> str:
    if not value:
        raise click.UsageError(
            f"{name} must be specified on the command line or in a configuration file."
        )
    return value


def _process_application_exception(exception: GroupingByException) -> None:
    click.secho("\n\n ERROR: ", fg="red", bold=True, nl=False, err=True)
    click.secho(exception.args[0], err=True)
    sys.exit(1)
