"""
DID driver.

Forwards DID document create and update operations to a Veres One
ledger and reports progress as it goes.
"""
from .drivers import drivers, get_drivers, send, send_operation, send_request, info
from .exceptions import (
    DriverError, LedgerError, LedgerConnectionError, LedgerTimeoutError,
    LedgerResponseError, AlreadyRegisteredError, DidNotFoundError,
    InvalidDidDocumentError
)
from .ledger import get_ledger_client
from .models import DriverOptions, OperationRequest, OperationResult, OperationType
from .version import __version__

__all__ = [
    "drivers",
    "get_drivers",
    "send",
    "send_operation",
    "send_request",
    "info",
    "get_ledger_client",
    "DriverOptions",
    "OperationRequest",
    "OperationResult",
    "OperationType",
    "DriverError",
    "LedgerError",
    "LedgerConnectionError",
    "LedgerTimeoutError",
    "LedgerResponseError",
    "AlreadyRegisteredError",
    "DidNotFoundError",
    "InvalidDidDocumentError",
    "__version__",
]
