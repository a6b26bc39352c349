"""CLI helpers for resolving storage options."""

from __future__ import annotations

import typer

from cloudstore.cli import _exitcodes as ec
from cloudstore.cli._output import print_error, print_object
from cloudstore.config import options_from_env
from cloudstore.errors import InvalidConfigurationError
from cloudstore.options import StorageOptions


def report_invalid(error: InvalidConfigurationError) -> None:
    """Report a configuration error as JSON or on stderr, per --json."""
    from cloudstore.cli import state

    if state.json_output:
        print_object({"valid": False, "field": error.field, "error": str(error)}, json_mode=True)
    else:
        print_error(str(error))


def resolve_options() -> StorageOptions:
    """Build options from the environment, exiting on unparseable values."""
    try:
        return options_from_env().build()
    except InvalidConfigurationError as e:
        report_invalid(e)
        raise typer.Exit(ec.INVALID_CONFIG)
