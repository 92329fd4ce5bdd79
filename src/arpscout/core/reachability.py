from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor

import ping3
from ping3 import errors as ping_errors

from .executor import run_blocking

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1.0
# extra time granted to the worker thread beyond the ICMP timeout
THREAD_GRACE = 0.5


class ReachabilityProbe:
    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT, executor: Executor | None = None
    ) -> None:
        self.timeout = timeout
        self.executor = executor

    def _ping(self, ip: str, timeout: float) -> bool:
        try:
            delay = ping3.ping(ip, timeout=timeout)
        except (OSError, ping_errors.PingError) as exc:
            logger.debug("Echo request to %s failed: %s", ip, exc)
            return False
        # ping3 returns the delay on success, None on timeout, False on error
        return delay is not None and delay is not False

    async def probe(self, ip: str, timeout: float | None = None) -> bool:
        limit = self.timeout if timeout is None else timeout
        try:
            reachable = await run_blocking(
                self._ping,
                ip,
                limit,
                executor=self.executor,
                timeout=limit + THREAD_GRACE,
            )
        except (asyncio.TimeoutError, TimeoutError):
            logger.debug("No echo reply from %s (timeout)", ip)
            return False
        logger.debug("%s is %s", ip, "reachable" if reachable else "unreachable")
        return reachable
