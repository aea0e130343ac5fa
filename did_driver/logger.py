"""
Status output for driver operations.

Progress lines are logged on the ``did_driver.status`` logger and echoed
to stdout unless the options ask for quiet output.
"""
import logging
from typing import Any

from .models import DriverOptions

status_logger = logging.getLogger("did_driver.status")


def log(options: Any, message: str) -> None:
    """
    Emit a human-readable status line.

    Args:
        options: Driver options (a mapping or DriverOptions)
        message: Line to emit
    """
    status_logger.info(message)
    if not DriverOptions.coerce(options).quiet:
        print(message)
