"""
Ledger client implementations.

This module defines the interface every ledger client follows and the
HTTP implementation used against a Veres One ledger node.
"""
import asyncio
import functools
import logging
import os
import urllib.parse
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions import (
    LedgerError, LedgerConnectionError, LedgerTimeoutError,
    LedgerResponseError, AlreadyRegisteredError, DidNotFoundError,
    InvalidDidDocumentError
)

logger = logging.getLogger(__name__)

Runner = Callable[..., Awaitable[Any]]


async def run_in_executor(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a blocking callable on the default executor of the running loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


def document_id(did_document: Any) -> str:
    """
    Get the DID a document describes.

    Args:
        did_document: DID document as a mapping or an object with an ``id``

    Returns:
        The document's ``id``

    Raises:
        InvalidDidDocumentError: If the document has no usable ``id``
    """
    if isinstance(did_document, Mapping):
        did = did_document.get("id")
    else:
        did = getattr(did_document, "id", None)
    if not did or not isinstance(did, str):
        raise InvalidDidDocumentError("DID document is missing an 'id'")
    return did


def document_json(did_document: Any) -> Any:
    """Return a JSON-serializable form of a DID document."""
    if hasattr(did_document, "model_dump"):
        return did_document.model_dump(by_alias=True, exclude_none=True)
    return did_document


class LedgerClient(ABC):
    """
    Abstract base class for ledger clients.

    Every operation is a coroutine so drivers can await them regardless
    of how the client reaches the ledger.
    """

    @abstractmethod
    async def register(self, did_document: Any) -> Any:
        """
        Send a DID registration to the ledger.

        Raises:
            LedgerError: If the ledger rejects or cannot receive the operation
        """
        pass

    @abstractmethod
    async def update(self, did_document: Any) -> Any:
        """
        Send a DID document update to the ledger.

        Raises:
            LedgerError: If the ledger rejects or cannot receive the operation
        """
        pass

    @abstractmethod
    async def get(self, did: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the current DID document for a DID.

        Returns:
            The DID document, or None if the ledger does not know the DID
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close any open connections or resources."""
        pass


class HttpLedgerClient(LedgerClient):
    """
    Ledger client speaking JSON over HTTPS to a ledger node.

    Blocking requests calls are handed to ``runner`` so they never block
    the event loop.
    """

    def __init__(
        self,
        base_url: str,
        runner: Optional[Runner] = None,
        timeout: Optional[int] = None,
        retry_count: int = 3,
        verify_ssl: bool = True
    ):
        """
        Initialize the HTTP ledger client.

        Args:
            base_url: Base URL of the ledger node (e.g. "https://veres.one")
            runner: Coroutine function used to run blocking calls
            timeout: Request timeout in seconds
            retry_count: Number of transport-level retries for idempotent requests
            verify_ssl: Whether to verify SSL certificates

        Raises:
            ValueError: If base_url is invalid or uses insecure HTTP
        """
        self._validate_ledger_url(base_url)
        self.base_url = base_url.rstrip('/')
        self.runner = runner or run_in_executor
        self.verify_ssl = verify_ssl

        # Get timeout from env var or parameter (default: 30 seconds)
        self.timeout = timeout or int(os.environ.get("DID_LEDGER_TIMEOUT", "30"))

        self.session = requests.Session()
        retries = Retry(
            total=retry_count,
            backoff_factor=0.5,
            status_forcelist=[502, 503, 504],
            # registrations (POST) are never retried
            allowed_methods=["GET", "PUT"],
            raise_on_status=False
        )
        self.session.mount("http://", HTTPAdapter(max_retries=retries))
        self.session.mount("https://", HTTPAdapter(max_retries=retries))

        logger.debug(f"Initialized HTTP ledger client for {self.base_url}")

    def _validate_ledger_url(self, url: str) -> None:
        """
        Validate the ledger URL is secure.

        Args:
            url: Ledger URL to validate

        Raises:
            ValueError: If URL is invalid or uses insecure HTTP
        """
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(f"Invalid ledger URL '{url}'")

        is_local = parsed.hostname in ("localhost", "127.0.0.1", "::1")
        if parsed.scheme != "https" and not is_local:
            if os.environ.get("DID_LEDGER_INSECURE") != "1":
                raise ValueError(
                    f"Ledger URL must use HTTPS for security (got: {parsed.scheme}://). "
                    "Set DID_LEDGER_INSECURE=1 to allow HTTP for development."
                )

    def _did_url(self, did: str) -> str:
        return f"{self.base_url}/dids/{urllib.parse.quote(did, safe=':')}"

    def _request(
        self,
        method: str,
        url: str,
        json: Any = None,
        allow_missing: bool = False
    ) -> Any:
        """
        Perform a blocking HTTP request against the ledger.

        Returns:
            Decoded JSON body, or None for an empty body or an allowed 404

        Raises:
            LedgerTimeoutError: If the request times out
            LedgerConnectionError: If the ledger cannot be reached
            LedgerResponseError: If the ledger answers with an error status
        """
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                timeout=self.timeout,
                verify=self.verify_ssl
            )
        except requests.Timeout as e:
            raise LedgerTimeoutError(f"Ledger request timed out: {e}") from e
        except requests.ConnectionError as e:
            raise LedgerConnectionError(f"Failed to connect to ledger: {e}") from e
        except requests.RequestException as e:
            raise LedgerError(f"Ledger request failed: {e}") from e

        status = response.status_code
        if status == 404 and allow_missing:
            return None
        if status == 409:
            raise AlreadyRegisteredError(f"DID already registered: {response.text}", status_code=status)
        if status == 404:
            raise DidNotFoundError(f"DID not found on ledger: {response.text}", status_code=status)
        if status >= 400:
            raise LedgerResponseError(f"Ledger returned HTTP {status}: {response.text}", status_code=status)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise LedgerResponseError(f"Invalid JSON response from ledger: {e}", status_code=status) from e

    async def register(self, did_document: Any) -> Any:
        logger.debug(f"Registering DID document at {self.base_url}")
        return await self.runner(
            self._request, "POST", f"{self.base_url}/dids",
            json={"didDocument": document_json(did_document)}
        )

    async def update(self, did_document: Any) -> Any:
        did = document_id(did_document)
        logger.debug(f"Updating {did} at {self.base_url}")
        return await self.runner(
            self._request, "PUT", self._did_url(did),
            json={"didDocument": document_json(did_document)}
        )

    async def get(self, did: str) -> Optional[Dict[str, Any]]:
        result = await self.runner(self._request, "GET", self._did_url(did), allow_missing=True)
        if isinstance(result, dict) and "didDocument" in result:
            return result["didDocument"]
        return result

    def close(self) -> None:
        self.session.close()
