"""
Data models for the DID driver.
"""
import os
from enum import Enum
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

LedgerMode = Literal["test", "dev", "live", "stub"]


class OperationType(str, Enum):
    """Operations the driver can forward to the ledger."""
    CREATE = "create"
    UPDATE = "update"


class DriverOptions(BaseModel):
    """
    Options shared by every driver operation.

    Unknown keys are kept so callers can pass through settings meant
    for their own ledger client factory or logger.
    """
    model_config = ConfigDict(extra="allow")

    mode: LedgerMode = Field(
        default_factory=lambda: os.environ.get("DID_LEDGER_MODE", "test"),
        validate_default=True,
    )
    hostname: Optional[str] = Field(
        default_factory=lambda: os.environ.get("DID_LEDGER_HOSTNAME") or None
    )
    timeout: Optional[int] = None
    retry_count: int = 3
    verify_ssl: bool = True
    quiet: bool = False

    @classmethod
    def coerce(cls, options: Any = None) -> "DriverOptions":
        """
        Build a DriverOptions from whatever the caller handed over.

        Args:
            options: None, a mapping, a DriverOptions, or any object with
                matching attributes

        Returns:
            DriverOptions instance
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        return cls.model_validate(options, from_attributes=True)


class OperationRequest(BaseModel):
    """A single create or update request against the ledger."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    options: Any = None
    did_document: Any
    operation_type: Union[OperationType, str] = OperationType.CREATE


class OperationResult(BaseModel):
    """Outcome of a forwarded ledger operation."""
    operation_type: str
    performed: bool = False
    success: bool = False
    error: Optional[str] = None
