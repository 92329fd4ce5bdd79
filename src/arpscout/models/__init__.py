"""Data models for arpscout."""

from arpscout.models.device import (
    HOSTNAME_FALLBACK,
    VENDOR_FALLBACK,
    ArpEntry,
    DeviceRecord,
    SyncState,
)
from arpscout.models.snapshot import Snapshot, SyncOutcome

__all__ = [
    "HOSTNAME_FALLBACK",
    "VENDOR_FALLBACK",
    "ArpEntry",
    "DeviceRecord",
    "Snapshot",
    "SyncOutcome",
    "SyncState",
]
