from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")

# reverse DNS, vendor lookup and echo request
LOOKUPS_PER_RECORD = 3


def lookup_executor(parallel_syncs: int) -> ThreadPoolExecutor:
    return ThreadPoolExecutor(
        max_workers=parallel_syncs * LOOKUPS_PER_RECORD,
        thread_name_prefix="arpscout-lookup",
    )


async def run_blocking(
    func: Callable[..., T],
    *args: object,
    executor: Executor | None = None,
    timeout: float | None = None,
) -> T:
    """Run ``func`` in ``executor`` and wait at most ``timeout`` once it starts.

    Time spent queued for a free worker does not count against the timeout.
    Raises TimeoutError when the call runs longer; the worker thread itself
    cannot be interrupted and finishes in the background.
    """
    loop = asyncio.get_running_loop()
    started = asyncio.Event()

    def _call() -> T:
        loop.call_soon_threadsafe(started.set)
        return func(*args)

    future = loop.run_in_executor(executor, _call)
    if timeout is None:
        return await future
    try:
        await started.wait()
    except asyncio.CancelledError:
        future.cancel()
        raise
    return await asyncio.wait_for(future, timeout=timeout)
