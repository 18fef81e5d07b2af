"""
WOTS+ Hash Function Instantiations

The scheme is generic over a single-argument hash capability: bytes in,
fixed-length digest out. This module names the concrete digests the package
ships and wraps a capability with the keyed uses WOTS+ makes of it.
"""

import hashlib
from typing import Callable, Dict, Optional

from Crypto.Hash import keccak

from .errors import InvalidParameterError
from .parameters import WOTSPlusParameterSet
from .utils import to_byte


HashFunction = Callable[[bytes], bytes]

# Domain separator for the randomization-element / secret-segment PRF
PRF_PREFIX = b"\x03"


def keccak_256(data: bytes) -> bytes:
    """Keccak-256 (the pre-standard SHA-3 padding used by Ethereum)."""
    return keccak.new(digest_bits=256, data=data).digest()


def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "keccak256": keccak_256,
    "sha3-256": sha3_256,
    "sha256": sha256,
    "sha512": sha512,
}


def get_hash_function(name: str) -> HashFunction:
    """Look up a named hash function."""
    if name not in HASH_FUNCTIONS:
        raise InvalidParameterError(f"Unknown hash function: {name}")
    return HASH_FUNCTIONS[name]


class HashFunctions:
    """
    Binds a hash capability to a parameter set.

    F is the plain hash, PRF the domain-separated keyed derivation and T_l the
    compression of all public key segments into the public key hash.
    """

    def __init__(self, params: WOTSPlusParameterSet, hash_function: HashFunction):
        self.params = params
        self.n = params.n
        self._hash = hash_function

        digest_len = len(hash_function(b""))
        if digest_len != self.n:
            raise InvalidParameterError(
                f"Hash function produces {digest_len}-byte digests, expected {self.n}"
            )

    def F(self, M: bytes) -> bytes:
        """Hash an arbitrary byte string to n bytes."""
        return self._hash(M)

    def PRF(self, seed: bytes, index: int) -> bytes:
        """PRF(seed, i) = F(0x03 || seed || toByte(i, 2))."""
        return self._hash(PRF_PREFIX + seed + to_byte(index, 2))

    def T_l(self, M_l: bytes) -> bytes:
        """Compress the concatenated chain endpoints into the public key hash."""
        return self._hash(M_l)


def get_hash_functions(
    params: WOTSPlusParameterSet,
    hash_function: Optional[HashFunction] = None
) -> HashFunctions:
    """Factory function to bind a hash capability to a parameter set."""
    if hash_function is None:
        if params.hash_name is None:
            raise InvalidParameterError(f"{params.name} does not name a hash function")
        hash_function = get_hash_function(params.hash_name)
    return HashFunctions(params, hash_function)
