from typing import Optional

import click
from pydantic import BaseModel, ConfigDict


class AppState(BaseModel):
    """Persistent application state."""

    records: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    compare: Optional[str] = None
    select: Optional[str] = None
    output: str = "table"
    quiet: bool = False
    debug: bool = False


pass_state = click.make_pass_decorator(AppState, ensure=True)


class ConfigurationState(BaseModel):
    """The current state of configuration file settings."""

    model_config = ConfigDict(extra="forbid")

    records: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    compare: Optional[str] = None
    select: Optional[str] = None
    output: Optional[str] = None
    quiet: bool = False
    debug: bool = False
