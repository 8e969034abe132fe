import asyncio
from typing import Callable

Scheduler = Callable[[Callable[[], None]], None]


def call_soon(callback: Callable[[], None]) -> None:
    """Run ``callback`` once the current synchronous block has finished.

    Inside a running asyncio event loop the callback is queued with
    ``loop.call_soon``. Outside one nothing is queued: the container then
    resolves on the first read or on ``run()``.

    Args:
        callback: Zero-argument callable to defer.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return
    loop.call_soon(callback)
