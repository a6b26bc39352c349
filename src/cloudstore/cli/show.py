"""cloudstore show — print the resolved storage options."""

from __future__ import annotations

from cloudstore.cli._options import resolve_options
from cloudstore.cli._output import print_object


def show_cmd() -> None:
    """Print storage options resolved from CLOUDSTORE_* environment variables."""
    from cloudstore.cli import state

    options = resolve_options()
    print_object(options.to_dict(), json_mode=state.json_output)
