"""
WOTS+ (Winternitz One-Time Signature Plus)

A hash-based one-time signature scheme, the building block of stateful
hash-based signature trees such as XMSS.

Usage:
    from wotsplus import WOTSPlus, keccak_256

    wots = WOTSPlus(keccak_256)  # 32-byte hash, w=16
    public_key, private_key = wots.generate_key_pair(private_seed, public_seed)
    signature = wots.sign(private_key, public_seed, message_digest)
    assert wots.verify(public_key, message_digest, signature)
"""

from .errors import (
    WOTSPlusError,
    InvalidParameterError,
    InvalidLengthError,
    ChainBoundsError,
)
from .hash_functions import (
    HashFunction,
    keccak_256,
    sha3_256,
    sha256,
    sha512,
    get_hash_function,
)
from .parameters import (
    WOTSPlusParameterSet,
    WOTSPLUS_KECCAK256_W16,
    WOTSPLUS_KECCAK256_W4,
    WOTSPLUS_SHA512_W16,
    DEFAULT_PARAMETER_SET,
    PARAMETER_SETS,
    get_parameter_set,
)
from .wots import (
    WOTSPlus,
    KeyPair,
    serialize_signature,
    deserialize_signature,
)
from .vectors import (
    WOTSPlusVector,
    load_test_vectors,
    dump_test_vectors,
    generate_test_vector,
    verify_test_vector,
)

__version__ = "1.0.0"
__all__ = [
    # Scheme
    "WOTSPlus",
    "KeyPair",
    "serialize_signature",
    "deserialize_signature",
    # Parameters
    "WOTSPlusParameterSet",
    "WOTSPLUS_KECCAK256_W16",
    "WOTSPLUS_KECCAK256_W4",
    "WOTSPLUS_SHA512_W16",
    "DEFAULT_PARAMETER_SET",
    "PARAMETER_SETS",
    "get_parameter_set",
    # Hash functions
    "HashFunction",
    "keccak_256",
    "sha3_256",
    "sha256",
    "sha512",
    "get_hash_function",
    # Errors
    "WOTSPlusError",
    "InvalidParameterError",
    "InvalidLengthError",
    "ChainBoundsError",
    # Test vectors
    "WOTSPlusVector",
    "load_test_vectors",
    "dump_test_vectors",
    "generate_test_vector",
    "verify_test_vector",
]
