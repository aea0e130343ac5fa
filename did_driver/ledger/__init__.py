"""
Ledger clients for the DID driver.

``get_ledger_client`` builds a fresh client for every call from the
driver options; clients are cheap and nothing here caches them.
"""
import logging
from typing import Any, Optional

from ..models import DriverOptions
from .client import LedgerClient, HttpLedgerClient, Runner, run_in_executor
from .stub_client import StubLedgerClient, clear_stub_store

__all__ = ['LedgerClient', 'HttpLedgerClient', 'StubLedgerClient',
           'get_ledger_client', 'clear_stub_store', 'run_in_executor',
           'DEFAULT_HOSTNAMES']

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAMES = {
    "test": "genesis.testnet.veres.one",
    "dev": "genesis.veres.one.localhost:42443",
    "live": "veres.one",
}


def get_ledger_client(options: Any = None, runner: Optional[Runner] = None) -> LedgerClient:
    """
    Create a ledger client from driver options.

    Args:
        options: Driver options (mapping or DriverOptions)
        runner: Coroutine function used by HTTP clients to run blocking calls

    Returns:
        LedgerClient instance

    Raises:
        ValueError: If the options are invalid or resolve to an insecure URL
    """
    opts = DriverOptions.coerce(options)
    if opts.mode == "stub":
        logger.debug("Using stub ledger client")
        return StubLedgerClient()

    hostname = opts.hostname or DEFAULT_HOSTNAMES[opts.mode]
    base_url = hostname if "://" in hostname else f"https://{hostname}"
    logger.debug(f"Using HTTP ledger client for {base_url} (mode={opts.mode})")
    return HttpLedgerClient(
        base_url,
        runner=runner,
        timeout=opts.timeout,
        retry_count=opts.retry_count,
        verify_ssl=opts.verify_ssl
    )
