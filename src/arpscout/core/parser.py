from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from arpscout.models import ArpEntry

logger = logging.getLogger(__name__)

# IP, MAC, entry type
DATA_LINE_TOKENS = 3


def _parse_line(line: str) -> ArpEntry | None:
    tokens = line.split()
    if len(tokens) != DATA_LINE_TOKENS:
        if tokens:
            logger.debug("Skipping address table line with %d tokens", len(tokens))
        return None
    ip, mac, _entry_type = tokens
    return ArpEntry(ip, mac)


@dataclass(frozen=True)
class AddressTable:
    """Lazy view of the data lines in raw address table output.

    Iterating re-parses the text, so the table can be walked any number of
    times and always yields the same entries.
    """

    raw: str

    def __iter__(self) -> Iterator[ArpEntry]:
        for line in self.raw.splitlines():
            entry = _parse_line(line)
            if entry is not None:
                yield entry


def parse_address_table(raw: str) -> AddressTable:
    return AddressTable(raw)
