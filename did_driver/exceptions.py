"""
Exceptions for the DID driver.
"""
from typing import Optional


class DriverError(Exception):
    """Base exception for DID driver errors."""
    pass


class LedgerError(DriverError):
    """Raised when a ledger operation fails."""
    pass


class LedgerConnectionError(LedgerError):
    """Raised when connection to the ledger fails."""
    pass


class LedgerTimeoutError(LedgerError):
    """Raised when a ledger request times out."""
    pass


class LedgerResponseError(LedgerError):
    """Raised when the ledger returns an error response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class AlreadyRegisteredError(LedgerResponseError):
    """Raised when attempting to register an already registered DID."""
    pass


class DidNotFoundError(LedgerResponseError):
    """Raised when updating a DID the ledger does not know about."""
    pass


class InvalidDidDocumentError(LedgerError):
    """Raised when a DID document is missing its identifier."""
    pass
