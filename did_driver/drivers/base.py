"""
Driver operations shared by every driver set.

A driver set forwards DID operations to a ledger client and reports
progress through the status logger. Subclasses only decide how blocking
ledger I/O is moved off the event loop.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

from ..ledger import LedgerClient, get_ledger_client
from ..logger import log
from ..models import OperationRequest, OperationResult, OperationType

logger = logging.getLogger(__name__)

# operation type -> (client method, message before, message after)
_OPERATIONS: Dict[str, Tuple[str, str, str]] = {
    OperationType.CREATE.value: (
        "register",
        "Preparing to register a DID on Veres One...",
        "DID registration sent to ledger.",
    ),
    OperationType.UPDATE.value: (
        "update",
        "Preparing to update a DID Document on Veres One...",
        "DID update sent to ledger.",
    ),
}

CONSENSUS_NOTICE = "Please wait ~15-30 seconds for ledger consensus."
INFO_NOTICE = "You may use the `info` command to monitor the registration of your DID."


def _report_error(error: Exception) -> None:
    logger.error(f"Ledger operation failed: {error}")
    print(f"An error occurred: {error}")


def _release(client: LedgerClient) -> None:
    try:
        client.close()
    except Exception as e:
        logger.warning(f"Error closing ledger client: {e}")


class DriverSet(ABC):
    """
    A set of driver operations bound to one way of running blocking I/O.
    """

    name = "base"

    @abstractmethod
    async def run_blocking(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a blocking callable without blocking the event loop."""
        pass

    def get_ledger_client(self, options: Any) -> LedgerClient:
        return get_ledger_client(options, runner=self.run_blocking)

    async def send_operation(
        self,
        options: Any,
        did_document: Any,
        operation_type: Any = OperationType.CREATE
    ) -> OperationResult:
        """
        Send a create or update operation to the ledger.

        Ledger faults are reported as an error line and in the returned
        result; they are never raised. An operation type other than
        "create" or "update" makes no ledger call. The ledger client is
        closed before returning.

        Args:
            options: Driver options, passed through to the ledger client factory
            did_document: DID document to register or update
            operation_type: "create" (default) or "update"

        Returns:
            OperationResult describing what happened
        """
        client = self.get_ledger_client(options)
        try:
            kind = operation_type.value if isinstance(operation_type, OperationType) else operation_type
            result = OperationResult(operation_type=str(kind))
            operation = _OPERATIONS.get(kind) if isinstance(kind, str) else None

            if operation is not None:
                method, before, after = operation
                log(options, before)
                result.performed = True
                try:
                    await getattr(client, method)(did_document)
                    log(options, after)
                    result.success = True
                except Exception as e:
                    _report_error(e)
                    result.error = str(e)
            else:
                logger.debug(f"No ledger call for operation type {kind!r}")

            log(options, CONSENSUS_NOTICE)
            log(options, INFO_NOTICE)
            return result
        finally:
            _release(client)

    async def send(
        self,
        options: Any,
        did_document: Any,
        operation_type: Any = OperationType.CREATE
    ) -> None:
        """Send a create or update operation to the ledger and report progress."""
        await self.send_operation(options, did_document, operation_type)

    async def send_request(self, request: OperationRequest) -> OperationResult:
        return await self.send_operation(
            request.options, request.did_document, request.operation_type
        )

    async def info(self, options: Any, did: str) -> Optional[Dict[str, Any]]:
        """
        Print the DID document the ledger currently holds for a DID.

        Args:
            options: Driver options, passed through to the ledger client factory
            did: DID to look up

        Returns:
            The DID document, or None if it is missing or the lookup failed
        """
        client = self.get_ledger_client(options)
        try:
            log(options, "Retrieving DID Document from Veres One...")
            try:
                did_document = await client.get(did)
            except Exception as e:
                _report_error(e)
                return None

            if did_document is None:
                log(options, "DID not found on ledger.")
                return None
            print(json.dumps(did_document, indent=2))
            return did_document
        finally:
            _release(client)
