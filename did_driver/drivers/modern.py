"""
Driver set for interpreters that provide ``asyncio.to_thread``.
"""
import asyncio
from typing import Any, Callable

from .base import DriverSet


class ModernDriverSet(DriverSet):
    """Runs blocking ledger I/O with ``asyncio.to_thread``."""

    name = "modern"

    async def run_blocking(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return await asyncio.to_thread(func, *args, **kwargs)
