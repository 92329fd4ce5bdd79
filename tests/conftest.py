from __future__ import annotations

import asyncio

import pytest

from arpscout.config import get_settings
from arpscout.models import HOSTNAME_FALLBACK, VENDOR_FALLBACK

SAMPLE_TABLE = (
    "192.168.1.10   AA-BB-CC-DD-EE-FF   dynamic\r\n"
    "header line\r\n"
    "192.168.1.1  11-22-33-44-55-66  static\r\n"
)


class FakeSource:
    def __init__(self, *outputs: str | Exception) -> None:
        self.outputs = list(outputs)
        self.calls = 0

    async def fetch(self) -> str:
        self.calls += 1
        # the last output repeats once the list is used up
        output = self.outputs[min(self.calls, len(self.outputs)) - 1]
        if isinstance(output, Exception):
            raise output
        return output


class FakeResolver:
    def __init__(self, name: str = HOSTNAME_FALLBACK, delay: float = 0.0) -> None:
        self.name = name
        self.delay = delay
        self.calls: list[str] = []

    async def resolve(self, ip: str) -> str:
        self.calls.append(ip)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.name


class FakeVendors:
    def __init__(self, vendor: str | Exception = VENDOR_FALLBACK) -> None:
        self.vendor = vendor
        self.calls: list[str] = []

    async def lookup_vendor(self, mac: str) -> str:
        self.calls.append(mac)
        if isinstance(self.vendor, Exception):
            raise self.vendor
        return self.vendor

    def close(self) -> None:
        pass


class FakeReachability:
    def __init__(self, reachable: bool = False) -> None:
        self.reachable = reachable
        self.calls: list[str] = []

    async def probe(self, ip: str, timeout: float | None = None) -> bool:
        self.calls.append(ip)
        return self.reachable


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ARPSCOUT_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_table() -> str:
    return SAMPLE_TABLE


@pytest.fixture
def fake_source() -> type[FakeSource]:
    return FakeSource


@pytest.fixture
def fake_resolver() -> type[FakeResolver]:
    return FakeResolver


@pytest.fixture
def fake_vendors() -> type[FakeVendors]:
    return FakeVendors


@pytest.fixture
def fake_reachability() -> type[FakeReachability]:
    return FakeReachability
