from __future__ import annotations

from .enrichment import EnrichmentOrchestrator
from .hostname import HostnameResolver
from .parser import AddressTable, parse_address_table
from .reachability import ReachabilityProbe
from .registry import NOT_FOUND, DeviceRegistry
from .source import AddressTableSource
from .vendor import VendorLookupClient, extract_oui

__all__ = [
    "NOT_FOUND",
    "AddressTable",
    "AddressTableSource",
    "DeviceRegistry",
    "EnrichmentOrchestrator",
    "HostnameResolver",
    "ReachabilityProbe",
    "VendorLookupClient",
    "extract_oui",
    "parse_address_table",
]
