from __future__ import annotations

import asyncio
import sys

import pytest

from arpscout.config import DiscoveryConfig
from arpscout.core import AddressTableSource
from arpscout.errors import ExecutionError


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


def test_fetch_returns_process_output():
    source = AddressTableSource(
        _python("print('192.168.1.1  11-22-33-44-55-66  dynamic')")
    )

    output = asyncio.run(source.fetch())

    assert output.split() == ["192.168.1.1", "11-22-33-44-55-66", "dynamic"]


def test_fetch_missing_command_raises_execution_error():
    source = AddressTableSource(["arpscout-no-such-command", "-a"])

    with pytest.raises(ExecutionError) as excinfo:
        asyncio.run(source.fetch())

    assert isinstance(excinfo.value.__cause__, OSError)


def test_fetch_timeout_raises_execution_error():
    source = AddressTableSource(_python("import time; time.sleep(5)"), timeout=0.2)

    with pytest.raises(ExecutionError, match="did not finish"):
        asyncio.run(source.fetch())


def test_fetch_undecodable_output_raises_execution_error():
    source = AddressTableSource(
        _python("import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"),
        encoding="ascii",
    )

    with pytest.raises(ExecutionError) as excinfo:
        asyncio.run(source.fetch())

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_nonzero_exit_still_returns_output():
    source = AddressTableSource(
        _python("print('No ARP Entries Found.'); raise SystemExit(1)")
    )

    assert asyncio.run(source.fetch()).strip() == "No ARP Entries Found."


def test_from_config():
    config = DiscoveryConfig(command=["ip", "neigh"], encoding="cp850", fetch_timeout=3)

    source = AddressTableSource.from_config(config)

    assert source.command == ("ip", "neigh")
    assert source.encoding == "cp850"
    assert source.timeout == 3
