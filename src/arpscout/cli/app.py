from __future__ import annotations

from typing import Annotated

import typer

from arpscout.utils.logging import setup_logging

from . import config as config_cmd
from .scan import register as register_scan
from .show import register as register_show
from .vendor import register as register_vendor

app = typer.Typer(
    help="arpscout - list and identify devices from the local ARP cache",
    no_args_is_help=True,
)

app.add_typer(config_cmd.app, name="config")

register_scan(app)
register_show(app)
register_vendor(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """arpscout CLI."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"arpscout version {get_version('arpscout')}")
        raise typer.Exit()
