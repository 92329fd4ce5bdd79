"""arpscout - discover devices in the local ARP cache and enrich them."""

from __future__ import annotations

from importlib.metadata import version

from .config import Settings, get_settings
from .core import (
    AddressTableSource,
    DeviceRegistry,
    EnrichmentOrchestrator,
    parse_address_table,
)
from .errors import ArpScoutError, ExecutionError, FormatError
from .models import DeviceRecord, Snapshot, SyncOutcome, SyncState

__all__ = [
    "AddressTableSource",
    "ArpScoutError",
    "DeviceRecord",
    "DeviceRegistry",
    "EnrichmentOrchestrator",
    "ExecutionError",
    "FormatError",
    "Settings",
    "Snapshot",
    "SyncOutcome",
    "SyncState",
    "__version__",
    "get_settings",
    "parse_address_table",
]

__version__ = version("arpscout")
