"""
Driver entry point.

Picks the driver set matching the running interpreter once, at import
time, and exposes its operations.
"""
import logging
import sys
from typing import Optional, Sequence

from .base import DriverSet, CONSENSUS_NOTICE, INFO_NOTICE
from .legacy import LegacyDriverSet
from .modern import ModernDriverSet

__all__ = ['DriverSet', 'ModernDriverSet', 'LegacyDriverSet', 'get_drivers',
           'drivers', 'send', 'send_operation', 'send_request', 'info',
           'MIN_MODERN_VERSION', 'CONSENSUS_NOTICE', 'INFO_NOTICE']

logger = logging.getLogger(__name__)

MIN_MODERN_VERSION = (3, 9)


def get_drivers(version_info: Optional[Sequence[int]] = None) -> DriverSet:
    """
    Get the driver set for an interpreter version.

    Args:
        version_info: Version to select for (defaults to the running interpreter)

    Returns:
        ModernDriverSet if the version is at least MIN_MODERN_VERSION,
        LegacyDriverSet otherwise
    """
    if version_info is None:
        version_info = sys.version_info
    if tuple(version_info[:2]) >= MIN_MODERN_VERSION:
        return ModernDriverSet()
    return LegacyDriverSet()


drivers = get_drivers()
logger.debug(f"Using {drivers.name} driver set")

send = drivers.send
send_operation = drivers.send_operation
send_request = drivers.send_request
info = drivers.info
