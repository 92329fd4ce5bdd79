from __future__ import annotations

import asyncio
import logging
import socket
from concurrent.futures import Executor

from arpscout.models import HOSTNAME_FALLBACK

from .executor import run_blocking

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


class HostnameResolver:
    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT, executor: Executor | None = None
    ) -> None:
        self.timeout = timeout
        self.executor = executor

    async def resolve(self, ip: str) -> str:
        try:
            host_name, _aliases, _addresses = await run_blocking(
                socket.gethostbyaddr,
                ip,
                executor=self.executor,
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, TimeoutError):
            logger.debug("Reverse lookup of %s timed out", ip)
            return HOSTNAME_FALLBACK
        except (OSError, UnicodeError, ValueError) as exc:
            logger.debug("Reverse lookup of %s failed: %s", ip, exc)
            return HOSTNAME_FALLBACK
        return host_name or HOSTNAME_FALLBACK
