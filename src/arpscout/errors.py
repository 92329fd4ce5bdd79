from __future__ import annotations


class ArpScoutError(Exception):
    """Base class for arpscout errors."""


class ExecutionError(ArpScoutError):
    """The address table could not be fetched."""


class FormatError(ArpScoutError, ValueError):
    """A MAC address is unusable for a vendor lookup."""
