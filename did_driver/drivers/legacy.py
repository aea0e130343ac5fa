"""
Driver set for older interpreters.

``asyncio.to_thread`` is not available before Python 3.9, so blocking
calls go through the loop's default executor instead.
"""
from typing import Any, Callable

from ..ledger import run_in_executor
from .base import DriverSet


class LegacyDriverSet(DriverSet):
    """Runs blocking ledger I/O with ``loop.run_in_executor``."""

    name = "legacy"

    async def run_blocking(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return await run_in_executor(func, *args, **kwargs)
