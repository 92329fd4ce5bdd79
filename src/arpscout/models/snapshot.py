from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .device import ArpEntry, DeviceRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Snapshot:
    generation: int
    records: tuple[DeviceRecord, ...] = ()
    taken_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def empty(cls) -> Snapshot:
        return cls(generation=0)

    def pairs(self) -> tuple[ArpEntry, ...]:
        return tuple(ArpEntry(r.ip_address, r.mac_address) for r in self.records)

    def all_synced(self) -> bool:
        return all(record.is_synced for record in self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class SyncOutcome:
    record: DeviceRecord
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
