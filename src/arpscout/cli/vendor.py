from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from arpscout.core import VendorLookupClient
from arpscout.errors import FormatError
from arpscout.models import VENDOR_FALLBACK

from .common import load_settings_or_exit


def register(app: typer.Typer) -> None:
    @app.command()
    def vendor(
        mac: str = typer.Argument(..., help="MAC address or OUI prefix"),
    ) -> None:
        """Look up the vendor registered for a MAC address."""
        console = Console()
        settings = load_settings_or_exit()
        client = VendorLookupClient.from_config(settings.vendor)

        try:
            name = asyncio.run(client.lookup_vendor(mac))
        except FormatError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        finally:
            client.close()

        if name == VENDOR_FALLBACK:
            console.print(f"[yellow]![/yellow] Could not resolve vendor for {mac}")
            raise typer.Exit(1)
        console.print(name, markup=False, highlight=False)
