"""cloudstore validate — check the resolved options are usable."""

from __future__ import annotations

import typer
from botocore.exceptions import BotoCoreError

from cloudstore.cli import _exitcodes as ec
from cloudstore.cli._options import report_invalid, resolve_options
from cloudstore.cli._output import print_error, print_object
from cloudstore.clients import botocore_config
from cloudstore.errors import InvalidConfigurationError


def validate_cmd() -> None:
    """Validate storage options and the client config derived from them."""
    from cloudstore.cli import state

    options = resolve_options()
    try:
        options.throw_if_not_valid()
        botocore_config(options)
    except InvalidConfigurationError as e:
        report_invalid(e)
        raise typer.Exit(ec.INVALID_CONFIG)
    except BotoCoreError as e:
        print_error(f"Cannot build client config: {e}")
        raise typer.Exit(ec.ERROR)

    if state.json_output:
        print_object({"valid": True}, json_mode=True)
    else:
        print("OK")
