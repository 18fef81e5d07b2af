"""
WOTS+ Parameter Sets

Defines the scheme constants derived from the hash output length (n) and the
Winternitz parameter (w), plus the named parameter sets shipped with the package.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidParameterError


# Chain lengths supported by the base-w encoding (RFC 8391 restricts w to 4 or 16)
SUPPORTED_CHAIN_LENGTHS = (4, 16)

# The PRF encodes chain positions as 2-byte big-endian integers
MAX_SIGNATURE_CHUNKS = 1 << 16


@dataclass(frozen=True)
class WOTSPlusParameterSet:
    """WOTS+ parameter set configuration."""

    name: str
    n: int          # Security parameter (hash output length in bytes)
    w: int = 16     # Winternitz parameter (values per hash chain)
    hash_name: Optional[str] = None  # Hash function the set is meant to be paired with

    def __post_init__(self):
        if self.w <= 0 or (self.w & (self.w - 1)) != 0:
            raise InvalidParameterError(f"Chain length must be a power of 2, got {self.w}")
        if self.n <= 0:
            raise InvalidParameterError(f"Hash length must be positive, got {self.n}")
        if self.w not in SUPPORTED_CHAIN_LENGTHS:
            raise InvalidParameterError(
                f"Chain length must be one of {SUPPORTED_CHAIN_LENGTHS}, got {self.w}"
            )
        if self.len_total > MAX_SIGNATURE_CHUNKS:
            raise InvalidParameterError(
                f"{self.len_total} chains exceed the 16-bit PRF index space"
            )
        # Chain steps consume randomization elements 1..w-1
        if self.len_total < self.w:
            raise InvalidParameterError(
                f"Hash length {self.n} yields {self.len_total} chains, fewer than w={self.w}"
            )

    @property
    def m(self) -> int:
        """Message digest length in bytes."""
        return self.n

    @property
    def lg_w(self) -> int:
        """Log2 of the Winternitz parameter."""
        return self.w.bit_length() - 1

    @property
    def len1(self) -> int:
        """Number of WOTS+ chains for the message: ceil(8n / lg(w))."""
        return (8 * self.n + self.lg_w - 1) // self.lg_w

    @property
    def len2(self) -> int:
        """Number of WOTS+ chains for the checksum: floor(lg(len1 * (w - 1)) / lg(w)) + 1."""
        max_checksum = self.len1 * (self.w - 1)
        return (max_checksum.bit_length() - 1) // self.lg_w + 1

    @property
    def len_total(self) -> int:
        """Total number of WOTS+ chains."""
        return self.len1 + self.len2

    @property
    def sig_size(self) -> int:
        """Signature size in bytes."""
        return self.len_total * self.n

    @property
    def pk_size(self) -> int:
        """Public key size in bytes (public seed || public key hash)."""
        return 2 * self.n


WOTSPLUS_KECCAK256_W16 = WOTSPlusParameterSet(
    name="WOTS+-KECCAK256-W16",
    n=32, w=16, hash_name="keccak256"
)

WOTSPLUS_KECCAK256_W4 = WOTSPlusParameterSet(
    name="WOTS+-KECCAK256-W4",
    n=32, w=4, hash_name="keccak256"
)

WOTSPLUS_SHA512_W16 = WOTSPlusParameterSet(
    name="WOTS+-SHA512-W16",
    n=64, w=16, hash_name="sha512"
)

DEFAULT_PARAMETER_SET = WOTSPLUS_KECCAK256_W16

# Dictionary of all parameter sets for lookup
PARAMETER_SETS = {
    "WOTS+-KECCAK256-W16": WOTSPLUS_KECCAK256_W16,
    "WOTS+-KECCAK256-W4": WOTSPLUS_KECCAK256_W4,
    "WOTS+-SHA512-W16": WOTSPLUS_SHA512_W16,
}


def get_parameter_set(name: str) -> WOTSPlusParameterSet:
    """Get a parameter set by name."""
    if name not in PARAMETER_SETS:
        raise InvalidParameterError(f"Unknown parameter set: {name}")
    return PARAMETER_SETS[name]
