from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator

from arpscout.models import ArpEntry, DeviceRecord, Snapshot

from .parser import parse_address_table
from .source import AddressTableSource

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def _unique(entries: Iterable[ArpEntry]) -> list[ArpEntry]:
    seen: set[ArpEntry] = set()
    unique: list[ArpEntry] = []
    for entry in entries:
        if entry in seen:
            continue
        seen.add(entry)
        unique.append(entry)
    return unique


class DeviceRegistry:
    """Owns the current snapshot of devices found in the address table.

    A refresh builds a complete new snapshot and publishes it with a single
    assignment. Records of a replaced snapshot are never touched again by the
    registry, so readers always see one whole snapshot.
    """

    def __init__(
        self, source: AddressTableSource, skip_if_unchanged: bool = False
    ) -> None:
        self._source = source
        self._skip_if_unchanged = skip_if_unchanged
        self._snapshot = Snapshot.empty()
        self._refresh_lock = asyncio.Lock()

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def records(self) -> tuple[DeviceRecord, ...]:
        return self._snapshot.records

    def __len__(self) -> int:
        return len(self._snapshot)

    def __iter__(self) -> Iterator[DeviceRecord]:
        return iter(self._snapshot.records)

    async def refresh(self) -> tuple[DeviceRecord, ...]:
        """Re-read the address table and replace the current snapshot.

        Raises ExecutionError when the table cannot be fetched; the previous
        snapshot stays in place.
        """
        async with self._refresh_lock:
            raw = await self._source.fetch()
            entries = _unique(parse_address_table(raw))
            current = self._snapshot

            if (
                self._skip_if_unchanged
                and current.records
                and tuple(entries) == current.pairs()
                and current.all_synced()
            ):
                logger.debug(
                    "Address table unchanged, keeping snapshot %d", current.generation
                )
                return current.records

            snapshot = Snapshot(
                generation=current.generation + 1,
                records=tuple(DeviceRecord.from_entry(entry) for entry in entries),
            )
            self._snapshot = snapshot
            logger.info(
                "Address table refreshed: %d device(s) (snapshot %d)",
                len(snapshot),
                snapshot.generation,
            )
            return snapshot.records

    def is_current(self, record: DeviceRecord) -> bool:
        return any(candidate is record for candidate in self._snapshot.records)

    def find_by_mac(self, mac: str) -> DeviceRecord | None:
        wanted = mac.casefold()
        return next(
            (r for r in self._snapshot.records if r.mac_address.casefold() == wanted),
            None,
        )

    def find_by_ip(self, ip: str) -> DeviceRecord | None:
        wanted = ip.casefold()
        return next(
            (r for r in self._snapshot.records if r.ip_address.casefold() == wanted),
            None,
        )

    def index_of(self, ip: str) -> int:
        wanted = ip.casefold()
        for index, record in enumerate(self._snapshot.records):
            if record.ip_address.casefold() == wanted:
                return index
        return NOT_FOUND
