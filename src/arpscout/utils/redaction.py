from __future__ import annotations

import re
from dataclasses import dataclass, field

from arpscout.models import DeviceRecord

_MAC_SEPARATOR = re.compile(r"[-:]")


@dataclass
class Redactor:
    enabled: bool = True
    _mac_map: dict[str, int] = field(default_factory=dict)
    _mac_counter: int = 0

    def redact_ip(self, ip: str) -> str:
        if not self.enabled:
            return ip
        parts = ip.split(".")
        if len(parts) == 4 and all(part.isdigit() for part in parts):
            return f"x.x.x.{parts[3]}"
        return ip

    def redact_mac(self, mac: str) -> str:
        """Keep the vendor prefix and replace the device part with a counter."""
        if not self.enabled:
            return mac
        separator = "-" if "-" in mac else ":"
        parts = _MAC_SEPARATOR.split(mac)
        if len(parts) != 6:
            return mac
        prefix = separator.join(parts[:3])
        key = mac.lower()
        counter = self._mac_map.get(key)
        if counter is None:
            self._mac_counter += 1
            counter = self._mac_counter
            self._mac_map[key] = counter
        return separator.join([prefix, "xx", "xx", f"{counter:02d}"])

    def redact_host(self, host_name: str | None) -> str:
        if host_name is None:
            return ""
        if not self.enabled or "." not in host_name:
            return host_name
        head, _, _ = host_name.partition(".")
        return f"{head}.x"

    def redact_record(self, record: DeviceRecord) -> DeviceRecord:
        """Return a copy of ``record`` for display; the original is untouched."""
        if not self.enabled:
            return record
        host_name = record.host_name
        return record.model_copy(
            update={
                "ip_address": self.redact_ip(record.ip_address),
                "mac_address": self.redact_mac(record.mac_address),
                "host_name": None if host_name is None else self.redact_host(host_name),
            }
        )
