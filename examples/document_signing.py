#!/usr/bin/env python3
"""
One-Time Document Signing

Demonstrates WOTS+ for signing a single document. The signer refuses to sign
twice with the same key pair, since a second signature would let anyone forge.
"""

import json
import secrets
from dataclasses import dataclass, asdict
from datetime import datetime, timezone

from wotsplus import (
    PARAMETER_SETS,
    WOTSPlus,
    WOTSPLUS_KECCAK256_W16,
    deserialize_signature,
    serialize_signature,
)


@dataclass
class SignedDocument:
    """A digitally signed document."""
    document_hash: str
    filename: str
    timestamp: str
    signature: str
    algorithm: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)


class OneTimeDocumentSigner:
    """Document signing service backed by a single WOTS+ key pair."""

    def __init__(self):
        self.scheme = WOTSPlus.from_parameter_set(WOTSPLUS_KECCAK256_W16)
        self.algorithm = self.scheme.params.name
        self._public_seed = secrets.token_bytes(self.scheme.hash_len)
        self._pk, self._sk = self.scheme.generate_key_pair(
            secrets.token_bytes(self.scheme.hash_len), self._public_seed
        )
        self._used = False

    @property
    def public_key(self) -> bytes:
        return self._pk

    def sign_document(self, document: bytes, filename: str = "document") -> SignedDocument:
        if self._used:
            raise RuntimeError("WOTS+ key pair already used; generate a new signer")
        self._used = True

        digest = self.scheme.hash_funcs.F(document)
        signature = self.scheme.sign(self._sk, self._public_seed, digest)
        timestamp = datetime.now(timezone.utc).isoformat()
        return SignedDocument(
            digest.hex(), filename, timestamp, serialize_signature(signature).hex(), self.algorithm
        )

    @staticmethod
    def verify_document(document: bytes, signed_doc: SignedDocument, public_key: bytes) -> bool:
        params = PARAMETER_SETS.get(signed_doc.algorithm)
        if not params:
            return False
        scheme = WOTSPlus.from_parameter_set(params)
        signature = deserialize_signature(bytes.fromhex(signed_doc.signature), params)
        return scheme.verify(public_key, scheme.hash_funcs.F(document), signature)


def main():
    print("=" * 60)
    print("One-Time Document Signing (WOTS+)")
    print("=" * 60)

    contract = b"""
    RELEASE MANIFEST

    Build 2024.11.3, signed once with a WOTS+ leaf key.
    """

    print("\n[1] Creating document signer...")
    signer = OneTimeDocumentSigner()
    print(f"    Algorithm: {signer.algorithm}")
    print(f"    Public key: {len(signer.public_key)} bytes")

    print("\n[2] Signing document...")
    signed_doc = signer.sign_document(contract, "release_manifest.txt")
    print(f"    Hash: {signed_doc.document_hash[:32]}...")
    print(f"    Signature: {len(signed_doc.signature)//2} bytes")

    print("\n[3] Verifying signature...")
    valid = OneTimeDocumentSigner.verify_document(contract, signed_doc, signer.public_key)
    print(f"    Valid: {valid}")

    print("\n[4] Detecting tampering...")
    tampered = contract.replace(b"2024.11.3", b"2024.11.4")
    valid = OneTimeDocumentSigner.verify_document(tampered, signed_doc, signer.public_key)
    print(f"    Tampered document valid: {valid}")

    print("\n[5] Refusing key reuse...")
    try:
        signer.sign_document(b"second document")
    except RuntimeError as e:
        print(f"    {e}")


if __name__ == "__main__":
    main()
