"""
WOTS+ Test Vectors

Reads and writes the JSON interchange format shared with other WOTS+
implementations: a mapping from vector name to
{publicKey, message, signature[], publicSeed, randomizationElements[]},
every byte field hex-encoded with an optional 0x prefix.
"""

import json
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping

from .wots import WOTSPlus

log = logging.getLogger(__name__)


def from_hex(value: str) -> bytes:
    """Decode hex, accepting an optional 0x prefix."""
    if value.startswith(("0x", "0X")):
        value = value[2:]
    return bytes.fromhex(value)


def to_hex(value: bytes) -> str:
    return "0x" + value.hex()


@dataclass
class WOTSPlusVector:
    """A published (public key, message, signature) triple with its expanded seed."""
    public_key: bytes
    message: bytes
    signature: List[bytes]
    public_seed: bytes
    randomization_elements: List[bytes]

    @classmethod
    def from_dict(cls, data: Mapping) -> "WOTSPlusVector":
        return cls(
            public_key=from_hex(data["publicKey"]),
            message=from_hex(data["message"]),
            signature=[from_hex(s) for s in data["signature"]],
            public_seed=from_hex(data["publicSeed"]),
            randomization_elements=[from_hex(e) for e in data["randomizationElements"]],
        )

    def to_dict(self) -> Dict:
        return {
            "publicKey": to_hex(self.public_key),
            "message": to_hex(self.message),
            "signature": [to_hex(s) for s in self.signature],
            "publicSeed": to_hex(self.public_seed),
            "randomizationElements": [to_hex(e) for e in self.randomization_elements],
        }


def parse_test_vectors(mapping: Mapping) -> Dict[str, WOTSPlusVector]:
    return {name: WOTSPlusVector.from_dict(data) for name, data in mapping.items()}


def load_test_vectors(path: str) -> Dict[str, WOTSPlusVector]:
    """Load a test-vector file."""
    with open(path, "r") as f:
        return parse_test_vectors(json.load(f))


def dump_test_vectors(vectors: Mapping[str, WOTSPlusVector], path: str) -> None:
    with open(path, "w") as f:
        json.dump({name: v.to_dict() for name, v in vectors.items()}, f, indent=2)


def generate_test_vector(
    scheme: WOTSPlus,
    private_seed: bytes,
    public_seed: bytes,
    message: bytes
) -> WOTSPlusVector:
    """Sign message with a fresh key pair and record everything a verifier needs."""
    public_key, private_key = scheme.generate_key_pair(private_seed, public_seed)
    signature = scheme.sign(private_key, public_seed, message)
    return WOTSPlusVector(
        public_key=public_key,
        message=message,
        signature=signature,
        public_seed=public_seed,
        randomization_elements=scheme.generate_randomization_elements(public_seed),
    )


def verify_test_vector(scheme: WOTSPlus, vector: WOTSPlusVector) -> bool:
    """
    Check a vector with both verification entry points.

    A vector whose publicSeed differs from the seed embedded in its public
    key is rejected.
    """
    public_seed, public_key_hash = scheme.split_public_key(vector.public_key)
    if public_seed != vector.public_seed:
        log.warning("publicSeed %s... does not match the public key", vector.public_seed[:8].hex())
        return False

    valid = scheme.verify(vector.public_key, vector.message, vector.signature)
    valid_with_elements = scheme.verify_with_randomization_elements(
        public_key_hash, vector.message, vector.signature, vector.randomization_elements
    )
    return valid and valid_with_elements
