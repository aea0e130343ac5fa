"""
In-memory ledger client.

Used with ``mode="stub"`` for development and tests. Documents live in a
process-wide store so a DID registered by one call can be read back by
a later ``info`` call.
"""
import copy
import logging
import threading
from typing import Any, Dict, Optional

from .client import LedgerClient, document_id, document_json
from ..exceptions import AlreadyRegisteredError, DidNotFoundError

logger = logging.getLogger(__name__)

_stub_store: Dict[str, Dict[str, Any]] = {}
_store_lock = threading.Lock()


def clear_stub_store() -> None:
    """Forget every document held by the stub ledger."""
    with _store_lock:
        _stub_store.clear()


class StubLedgerClient(LedgerClient):
    """Ledger client that keeps DID documents in memory."""

    def __init__(self, store: Optional[Dict[str, Dict[str, Any]]] = None):
        self.store = _stub_store if store is None else store

    async def register(self, did_document: Any) -> Dict[str, Any]:
        did = document_id(did_document)
        with _store_lock:
            if did in self.store:
                raise AlreadyRegisteredError(f"DID already registered: {did}", status_code=409)
            self.store[did] = copy.deepcopy(document_json(did_document))
        logger.info(f"Stub ledger registered {did}")
        return {"id": did}

    async def update(self, did_document: Any) -> Dict[str, Any]:
        did = document_id(did_document)
        with _store_lock:
            if did not in self.store:
                raise DidNotFoundError(f"DID not found on ledger: {did}", status_code=404)
            self.store[did] = copy.deepcopy(document_json(did_document))
        logger.info(f"Stub ledger updated {did}")
        return {"id": did}

    async def get(self, did: str) -> Optional[Dict[str, Any]]:
        with _store_lock:
            doc = self.store.get(did)
        return copy.deepcopy(doc) if doc is not None else None

    def close(self) -> None:
        """Close the stub client (no-op)."""
        pass
