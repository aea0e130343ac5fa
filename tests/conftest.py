"""
Pytest fixtures for the DID driver tests.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from did_driver.ledger import clear_stub_store

TEST_DID = "did:v1:test:nym:z6MkTestDid"
TEST_LEDGER_URL = "https://ledger.example.com"


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep ledger settings from the developer's shell out of the tests."""
    for name in ("DID_LEDGER_MODE", "DID_LEDGER_HOSTNAME", "DID_LEDGER_TIMEOUT", "DID_LEDGER_INSECURE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_stub_store():
    clear_stub_store()
    yield
    clear_stub_store()


@pytest.fixture
def did_document():
    return {
        "@context": "https://w3id.org/did/v0.11",
        "id": TEST_DID,
        "authentication": [{
            "id": f"{TEST_DID}#authn-key-1",
            "type": "Ed25519VerificationKey2018",
            "controller": TEST_DID,
            "publicKeyBase58": "GycSSui454dpYRKiFdsQ5uaE8Gy3ac6dSMPcAoQsk8yq",
        }],
    }


@pytest.fixture
def mock_ledger_client():
    """A ledger client whose register/update/get are AsyncMocks."""
    client = MagicMock()
    client.register = AsyncMock(return_value={"id": TEST_DID})
    client.update = AsyncMock(return_value={"id": TEST_DID})
    client.get = AsyncMock(return_value=None)
    return client


@pytest.fixture
def mock_factory(mock_ledger_client):
    """Patch the ledger client factory used by the driver sets."""
    with patch("did_driver.drivers.base.get_ledger_client", return_value=mock_ledger_client) as factory:
        yield factory
