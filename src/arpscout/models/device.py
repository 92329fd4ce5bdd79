"""Device models."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field, PrivateAttr

HOSTNAME_FALLBACK = "N/A"
VENDOR_FALLBACK = "vendor unresolved"


class ArpEntry(NamedTuple):
    """One data line of the address table."""

    ip: str
    mac: str


class SyncState(str, Enum):
    UNSYNCED = "unsynced"
    SYNCED = "synced"


def _is_resolved(value: str | None, fallback: str) -> bool:
    return bool(value) and value != fallback


class DeviceRecord(BaseModel):
    """A device seen in the address table.

    Two records are equal when their (ip_address, mac_address) keys match;
    enrichment fields take no part in equality or hashing.
    """

    model_config = {"validate_assignment": True, "extra": "forbid"}

    ip_address: str = Field(frozen=True)
    mac_address: str = Field(frozen=True)
    host_name: str | None = None
    vendor: str | None = None
    is_available: bool = False
    sync_state: SyncState = SyncState.UNSYNCED

    _lock: asyncio.Lock = PrivateAttr(default_factory=asyncio.Lock)

    @classmethod
    def from_entry(cls, entry: ArpEntry) -> DeviceRecord:
        return cls(ip_address=entry.ip, mac_address=entry.mac)

    @property
    def key(self) -> tuple[str, str]:
        return (self.ip_address, self.mac_address)

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock

    @property
    def is_synced(self) -> bool:
        return self.sync_state is SyncState.SYNCED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeviceRecord):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def apply_enrichment(
        self, host_name: str, vendor: str, is_available: bool
    ) -> None:
        """Store lookup results and mark the record synced if a name resolved."""
        self.host_name = host_name
        self.vendor = vendor
        self.is_available = is_available
        if _is_resolved(host_name, HOSTNAME_FALLBACK) or _is_resolved(
            vendor, VENDOR_FALLBACK
        ):
            self.sync_state = SyncState.SYNCED

    def describe(self, index: int) -> str:
        return (
            f"ARP-Table Index: {index}\n"
            f"IP-Address\t{self.ip_address}\n"
            f"MAC-Address\t{self.mac_address}"
        )
