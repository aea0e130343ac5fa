#!/usr/bin/env python3
"""
Register a DID document and read it back.

Runs against the in-memory stub ledger unless DID_LEDGER_MODE is set,
e.g. DID_LEDGER_MODE=test to use the Veres One test network.
"""
import asyncio
import os

import did_driver


async def main():
    options = {"mode": os.environ.get("DID_LEDGER_MODE", "stub")}
    did = os.environ.get("DID", "did:v1:test:nym:z6MkExampleDid")
    did_document = {
        "@context": "https://w3id.org/did/v0.11",
        "id": did,
        "authentication": [{
            "id": f"{did}#authn-key-1",
            "type": "Ed25519VerificationKey2018",
            "controller": did,
            "publicKeyBase58": "GycSSui454dpYRKiFdsQ5uaE8Gy3ac6dSMPcAoQsk8yq",
        }],
    }

    print(f"Using did-driver v{did_driver.__version__} ({did_driver.drivers.name} driver set)")
    await did_driver.send(options, did_document)

    did_document["service"] = [{
        "id": f"{did}#hub",
        "type": "IdentityHub",
        "serviceEndpoint": "https://hub.example.com",
    }]
    await did_driver.send(options, did_document, operation_type="update")

    await did_driver.info(options, did)


if __name__ == "__main__":
    asyncio.run(main())
