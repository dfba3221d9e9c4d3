import logging
import sys
from typing import Any, Callable

import click
import pydantic
import yaml

from grouping_by.cli.state import AppState
from grouping_by.cli.state import ConfigurationState

OUTPUT_CHOICES = ["table", "json"]


def records_argument(function: Callable):
    """Decorator for the `records` argument. Not exposed to the underlying command.

    The argument is optional on the command line when the configuration file
    specifies the records path.
    """

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            state.records = value
        return state.records

    return click.argument(
        "records",
        nargs=1,
        required=False,
        type=click.types.Path(exists=True, file_okay=True, dir_okay=False),
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
    )(function)


def _field_option(name: str, help: str) -> Callable:
    def decorator(function: Callable):
        def callback(context: click.Context, parameter: click.Parameter, value: Any):
            state = context.ensure_object(AppState)
            if value:
                setattr(state, name, value)
            return getattr(state, name)

        return click.option(
            f"--{name}",
            name,
            metavar="FIELD",
            type=click.types.STRING,
            callback=callback,
            expose_value=False,  # Must be False
            is_eager=False,  # Must be False
            help=help,
        )(function)

    return decorator


key_option = _field_option("key", "Record field used to group records.")
value_option = _field_option("value", "Record field summed for each group.")
compare_option = _field_option(
    "compare", "Record field compared to select a single record of each group."
)
select_option = _field_option(
    "select",
    "Record field reported for the selected record of each group. [whole record]",
)


def output_option(function: Callable):
    """Decorator for the `output` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            state.output = value
        return state.output

    return click.option(
        "--output",
        default=None,  # Must be None
        metavar="OUTPUT",
        type=click.types.Choice(OUTPUT_CHOICES),
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Specifies the format of the results. Allowed values: {table, json}.",
    )(function)


def configuration_option(function: Callable):
    """Decorator for the `config` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            try:
                with open(value, "rt") as file:
                    contents = yaml.load(file, Loader=yaml.SafeLoader)
                configuration = ConfigurationState.model_validate(contents or {})
            except (yaml.YAMLError, pydantic.ValidationError) as exception:
                raise click.BadParameter(str(exception), context, parameter)

            if configuration.output and configuration.output not in OUTPUT_CHOICES:
                raise click.BadParameter(
                    f"invalid output {configuration.output!r}", context, parameter
                )

            for name in configuration.model_fields_set:
                setattr(state, name, getattr(configuration, name))
        return value

    return click.option(
        "--config",
        default=None,
        type=click.types.Path(exists=True, file_okay=True, dir_okay=False),
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=True,  # Must be True
        help="Path to the yaml configuration file.",
    )(function)


def quiet_option(function: Callable):
    """Decorator for the `quiet` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            state.quiet = value
        return state.quiet

    return click.option(
        "-q",
        "--quiet",
        is_flag=True,
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Quite mode, suppress all output.",
    )(function)


def debug_option(function: Callable):
    """
    Decorator for the `debug` command line option. Not exposed underlying command.

    The `debug` option prints debugging information to stdout. Should force the
    quiet command to a matching value.
    """

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            state.debug = value
        if state.debug:
            logging.basicConfig(
                format="%(filename)s: %(message)s",
                stream=sys.stdout,
                level=logging.DEBUG,
            )
            state.quiet = True
        return state.debug

    return click.option(
        "-d",
        "--debug",
        is_flag=True,
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Enable debugging output. Automatically enters quiet mode.",
    )(function)
