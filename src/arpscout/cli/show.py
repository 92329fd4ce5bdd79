from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from arpscout.config import Settings
from arpscout.errors import ExecutionError
from arpscout.models import DeviceRecord
from arpscout.utils.redaction import Redactor

from .common import build_orchestrator, build_registry, load_settings_or_exit


async def select_device(
    settings: Settings, target: str
) -> tuple[int, DeviceRecord] | None:
    """Refresh the table and enrich the device matching ``target`` (IP or MAC)."""
    registry = build_registry(settings)
    await registry.refresh()

    record = registry.find_by_ip(target) or registry.find_by_mac(target)
    if record is None:
        return None

    orchestrator = build_orchestrator(settings, registry)
    try:
        await orchestrator.sync(record)
    finally:
        orchestrator.close()
    return registry.index_of(record.ip_address), record


def register(app: typer.Typer) -> None:
    @app.command()
    def show(
        target: str = typer.Argument(..., help="IP or MAC address of the device"),
        redact: bool = typer.Option(
            False,
            "--redact",
            help="Redact sensitive values in output",
        ),
    ) -> None:
        """Show host name, vendor and reachability of one device."""
        console = Console(highlight=False)
        settings = load_settings_or_exit()

        try:
            found = asyncio.run(select_device(settings, target))
        except ExecutionError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None

        if found is None:
            console.print(f"[yellow]![/yellow] No device '{target}' in the ARP table")
            raise typer.Exit(1)

        index, record = found
        record = Redactor(enabled=redact).redact_record(record)
        console.print(record.describe(index), markup=False)
        console.print(f"Host-Name\t{record.host_name}", markup=False)
        console.print(f"Vendor\t\t{record.vendor}", markup=False)
        console.print(f"Available\t{'yes' if record.is_available else 'no'}")
        console.print(f"State\t\t{record.sync_state.value}")
