"""cloudstore CLI: inspect and check storage client options."""

from __future__ import annotations

import typer

from cloudstore.cli import show, validate

app = typer.Typer(
    name="cloudstore",
    help="Inspect and check object-storage client options.",
    no_args_is_help=True,
)


class _State:
    """Global CLI state shared across subcommands."""

    json_output: bool = False


state = _State()


def _version_callback(value: bool) -> None:
    if value:
        try:
            from importlib.metadata import version

            v = version("cloudstore")
        except Exception:
            v = "unknown"
        print(f"cloudstore {v}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="JSON output when supported"),
    version: bool = typer.Option(
        False, "--version", help="Show version", is_eager=True, callback=_version_callback
    ),
) -> None:
    """Global options for all cloudstore commands."""
    state.json_output = json_output
    if ctx.invoked_subcommand is None and not version:
        print(ctx.get_help())
        raise typer.Exit()


app.command(name="show")(show.show_cmd)
app.command(name="validate")(validate.validate_cmd)


def main() -> None:
    """Entry point for the cloudstore CLI."""
    app()
