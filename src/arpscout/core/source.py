from __future__ import annotations

import asyncio
import contextlib
import logging
import subprocess
import sys
from collections.abc import Sequence

from arpscout.config import DiscoveryConfig
from arpscout.errors import ExecutionError

logger = logging.getLogger(__name__)


def _creation_flags() -> int:
    # keep the console window hidden when running under a GUI on Windows
    if sys.platform == "win32":
        return subprocess.CREATE_NO_WINDOW
    return 0


class AddressTableSource:
    """Runs the platform's address table query and returns its output."""

    def __init__(
        self,
        command: Sequence[str] = ("arp", "-a"),
        encoding: str = "utf-8",
        timeout: float = 10.0,
    ) -> None:
        self.command = tuple(command)
        self.encoding = encoding
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: DiscoveryConfig) -> AddressTableSource:
        return cls(config.command, config.encoding, config.fetch_timeout)

    async def fetch(self) -> str:
        cmdline = " ".join(self.command)
        logger.debug("Running %s", cmdline)
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
                creationflags=_creation_flags(),
            )
        except OSError as exc:
            raise ExecutionError(f"Could not run '{cmdline}': {exc}") from exc

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except (asyncio.TimeoutError, TimeoutError) as exc:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            raise ExecutionError(
                f"'{cmdline}' did not finish within {self.timeout:.1f}s"
            ) from exc
        except OSError as exc:
            raise ExecutionError(f"Could not read output of '{cmdline}': {exc}") from exc

        if proc.returncode:
            logger.warning("'%s' exited with status %d", cmdline, proc.returncode)

        try:
            return stdout.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ExecutionError(
                f"Could not decode output of '{cmdline}' as {self.encoding}"
            ) from exc
