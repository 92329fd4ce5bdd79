from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.table import Table

from arpscout.config import Settings
from arpscout.errors import ExecutionError
from arpscout.models import DeviceRecord
from arpscout.utils.redaction import Redactor

from .common import build_orchestrator, build_registry, load_settings_or_exit

logger = logging.getLogger(__name__)


async def discover(settings: Settings, sync: bool) -> tuple[DeviceRecord, ...]:
    registry = build_registry(settings)
    records = await registry.refresh()
    if not sync or not records:
        return records

    orchestrator = build_orchestrator(settings, registry)
    try:
        outcomes = await orchestrator.sync_all()
    finally:
        orchestrator.close()
    failed = [outcome for outcome in outcomes if not outcome.ok]
    if failed:
        logger.warning("%d device(s) could not be enriched", len(failed))
    return registry.records


def _availability(record: DeviceRecord) -> str:
    return "[green]yes[/green]" if record.is_available else "[red]no[/red]"


def register(app: typer.Typer) -> None:
    @app.command()
    def scan(
        sync: bool = typer.Option(
            True,
            "--sync/--no-sync",
            help="Resolve host names, vendors and reachability",
        ),
        redact: bool = typer.Option(
            False,
            "--redact",
            help="Redact sensitive values in output",
        ),
    ) -> None:
        """List the devices in the local ARP cache."""
        console = Console()
        settings = load_settings_or_exit()

        console.print("Reading ARP table...")
        try:
            records = asyncio.run(discover(settings, sync))
        except ExecutionError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None

        if not records:
            console.print("ARP table is empty.")
            return

        redactor = Redactor(enabled=redact)
        table = Table()
        table.add_column("#", justify="right")
        table.add_column("IP", style="cyan")
        table.add_column("MAC Address")
        table.add_column("Host", style="green")
        table.add_column("Vendor", style="yellow")
        table.add_column("Available")
        table.add_column("State")

        for index, record in enumerate(records):
            table.add_row(
                str(index),
                redactor.redact_ip(record.ip_address),
                redactor.redact_mac(record.mac_address),
                redactor.redact_host(record.host_name),
                record.vendor or "",
                _availability(record),
                record.sync_state.value,
            )

        console.print(table)
        console.print(f"\n[green]Found {len(records)} device(s)[/green]")
