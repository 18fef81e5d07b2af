"""
WOTS+ (Winternitz One-Time Signature Plus) Implementation

Key generation, signing and verification over an injected hash function.
Randomization elements are expanded from a public seed, so a public key is
the public seed followed by the hash of all chain endpoints.

A key pair must sign at most one message: signing is deterministic, and two
signatures under one key reveal enough chain values to forge others.
"""

import hmac
import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .encoding import compute_chain_indexes
from .errors import ChainBoundsError, InvalidLengthError
from .hash_functions import HashFunction, HashFunctions, get_hash_functions
from .parameters import WOTSPlusParameterSet
from .utils import concat, xor_bytes

log = logging.getLogger(__name__)


class KeyPair(NamedTuple):
    public_key: bytes
    private_key: bytes


def generate_randomization_elements(hash_funcs: HashFunctions, public_seed: bytes) -> List[bytes]:
    """
    Expand the public seed into len_total randomization elements.

    Element 0 is the function key; elements 1..w-1 mask the chain steps.
    """
    return [hash_funcs.PRF(public_seed, i) for i in range(hash_funcs.params.len_total)]


def chain(
    hash_funcs: HashFunctions,
    X: bytes,
    randomization_elements: Sequence[bytes],
    i: int,
    s: int
) -> bytes:
    """
    Compute the s-step hash chain starting at X from position i.

    Step k hashes the running value XORed with randomization element i + k.

    Args:
        hash_funcs: Hash function instantiation
        X: Starting value (n bytes)
        randomization_elements: Expanded public seed
        i: Starting index in chain
        s: Number of steps

    Returns:
        Chain output (n bytes)
    """
    if i < 0 or s < 0 or i + s >= hash_funcs.params.w:
        raise ChainBoundsError(
            f"Chain walk from {i} by {s} steps leaves a chain of length {hash_funcs.params.w}"
        )

    tmp = X
    for j in range(i + 1, i + s + 1):
        tmp = hash_funcs.F(xor_bytes(tmp, randomization_elements[j]))

    return tmp


def _secret_segment(
    hash_funcs: HashFunctions,
    private_key: bytes,
    function_key: bytes,
    chain_index: int
) -> bytes:
    """Starting value of chain i: F(function_key || PRF(private_key, i + 1))."""
    return hash_funcs.F(function_key + hash_funcs.PRF(private_key, chain_index + 1))


def wots_keygen(
    hash_funcs: HashFunctions,
    private_seed: bytes,
    public_seed: bytes
) -> KeyPair:
    """
    Generate a WOTS+ key pair.

    Every chain is walked to its end; the public key is
    public_seed || T_l(endpoint_0 || ... || endpoint_{len-1}).
    """
    params = hash_funcs.params

    private_key = hash_funcs.F(private_seed + public_seed)

    elements = generate_randomization_elements(hash_funcs, public_seed)
    function_key = elements[0]

    tmp = b""
    for i in range(params.len_total):
        sk_i = _secret_segment(hash_funcs, private_key, function_key, i)
        tmp += chain(hash_funcs, sk_i, elements, 0, params.w - 1)

    public_key_hash = hash_funcs.T_l(tmp)
    return KeyPair(public_seed + public_key_hash, private_key)


def wots_sign(
    hash_funcs: HashFunctions,
    M: bytes,
    private_key: bytes,
    public_seed: bytes
) -> List[bytes]:
    """Walk each chain from its secret segment to the index encoded by M."""
    elements = generate_randomization_elements(hash_funcs, public_seed)
    function_key = elements[0]

    sig = []
    for i, chain_idx in enumerate(compute_chain_indexes(M, hash_funcs.params)):
        sk_i = _secret_segment(hash_funcs, private_key, function_key, i)
        sig.append(chain(hash_funcs, sk_i, elements, 0, chain_idx))

    return sig


def wots_pk_from_sig(
    hash_funcs: HashFunctions,
    sig: Sequence[bytes],
    M: bytes,
    randomization_elements: Sequence[bytes]
) -> bytes:
    """
    Complete every chain from the signature values and compress the endpoints.

    Returns the public key hash implied by (sig, M).
    """
    w = hash_funcs.params.w

    tmp = b""
    for sig_i, chain_idx in zip(sig, compute_chain_indexes(M, hash_funcs.params)):
        tmp += chain(hash_funcs, sig_i, randomization_elements, chain_idx, w - 1 - chain_idx)

    return hash_funcs.T_l(tmp)


def serialize_signature(signature: Sequence[bytes]) -> bytes:
    """Flatten a signature vector into len_total * n bytes."""
    return concat(*signature)


def deserialize_signature(data: bytes, params: WOTSPlusParameterSet) -> List[bytes]:
    """Split a flat signature back into len_total segments of n bytes."""
    if len(data) != params.sig_size:
        raise InvalidLengthError(f"signature must be {params.sig_size} bytes, got {len(data)}")
    n = params.n
    return [data[i * n:(i + 1) * n] for i in range(params.len_total)]


class WOTSPlus:
    """
    WOTS+ one-time signature scheme

    Holds a validated parameter set and the bound hash function; no other
    state, so one instance may serve any number of key pairs and threads.
    """

    def __init__(
        self,
        hash_function: Optional[HashFunction],
        hash_len: int = 32,
        chain_len: int = 16,
        params: Optional[WOTSPlusParameterSet] = None
    ):
        """
        Initialize WOTS+ from (hash, n, w) or from a prebuilt parameter set.

        A None hash_function resolves the hash named by the parameter set.
        """
        if params is None:
            params = WOTSPlusParameterSet(name=f"WOTS+-N{hash_len}-W{chain_len}", n=hash_len, w=chain_len)
        self.params = params
        self.hash_funcs = get_hash_functions(params, hash_function)
        log.debug(
            "WOTS+ %s: n=%d w=%d len1=%d len2=%d",
            params.name, params.n, params.w, params.len1, params.len2,
        )

    @classmethod
    def from_parameter_set(
        cls,
        params: WOTSPlusParameterSet,
        hash_function: Optional[HashFunction] = None
    ) -> "WOTSPlus":
        """Build a scheme from a named set, resolving its hash function when none is given."""
        return cls(hash_function, params=params)

    @property
    def hash_len(self) -> int:
        return self.params.n

    @property
    def message_len(self) -> int:
        return self.params.m

    @property
    def chain_len(self) -> int:
        return self.params.w

    @property
    def lg_chain_len(self) -> int:
        return self.params.lg_w

    @property
    def num_message_chunks(self) -> int:
        return self.params.len1

    @property
    def num_checksum_chunks(self) -> int:
        return self.params.len2

    @property
    def num_signature_chunks(self) -> int:
        return self.params.len_total

    @property
    def signature_size(self) -> int:
        return self.params.sig_size

    @property
    def public_key_size(self) -> int:
        return self.params.pk_size

    def _check_length(self, label: str, value: bytes, expected: int) -> None:
        if len(value) != expected:
            raise InvalidLengthError(f"{label} length must be {expected} bytes, got {len(value)}")

    def generate_randomization_elements(self, public_seed: bytes) -> List[bytes]:
        self._check_length("public seed", public_seed, self.hash_len)
        return generate_randomization_elements(self.hash_funcs, public_seed)

    def compute_chain_indexes(self, message: bytes) -> List[int]:
        self._check_length("message", message, self.message_len)
        return compute_chain_indexes(message, self.params)

    def split_public_key(self, public_key: bytes) -> Tuple[bytes, bytes]:
        """Return (public_seed, public_key_hash)."""
        self._check_length("public key", public_key, self.public_key_size)
        return public_key[:self.hash_len], public_key[self.hash_len:]

    def generate_key_pair(self, private_seed: bytes, public_seed: bytes) -> KeyPair:
        """
        Derive a key pair from a private seed and a public seed.

        Both seeds are n bytes. The caller supplies the randomness and must
        use the resulting key for at most one signature.
        """
        self._check_length("private seed", private_seed, self.hash_len)
        self._check_length("public seed", public_seed, self.hash_len)

        key_pair = wots_keygen(self.hash_funcs, private_seed, public_seed)
        log.debug("Generated WOTS+ key pair, public key %s...", key_pair.public_key[:8].hex())
        return key_pair

    def sign(self, private_key: bytes, public_seed: bytes, message: bytes) -> List[bytes]:
        """
        Sign an m-byte message digest.

        Returns len_total segments of n bytes. Signing is deterministic.
        """
        self._check_length("private key", private_key, self.hash_len)
        self._check_length("public seed", public_seed, self.hash_len)
        self._check_length("message", message, self.message_len)

        signature = wots_sign(self.hash_funcs, message, private_key, public_seed)
        log.debug("Signed message with WOTS+ key for public seed %s...", public_seed[:8].hex())
        return signature

    def public_key_from_signature(
        self,
        public_seed: bytes,
        message: bytes,
        signature: Sequence[bytes]
    ) -> bytes:
        """Recompute the public key hash implied by a signature."""
        elements = self.generate_randomization_elements(public_seed)
        self._check_signature(message, signature)
        return wots_pk_from_sig(self.hash_funcs, signature, message, elements)

    def verify(self, public_key: bytes, message: bytes, signature: Sequence[bytes]) -> bool:
        """
        Verify a WOTS+ signature.

        1. Split the public key into public seed and public key hash.
        2. Regenerate the randomization elements from the public seed.
        3. Complete each chain from its signature value and compare the
           compressed endpoints against the public key hash.
        """
        public_seed, public_key_hash = self.split_public_key(public_key)
        elements = generate_randomization_elements(self.hash_funcs, public_seed)

        return self.verify_with_randomization_elements(
            public_key_hash, message, signature, elements
        )

    def verify_with_randomization_elements(
        self,
        public_key_hash: bytes,
        message: bytes,
        signature: Sequence[bytes],
        randomization_elements: Sequence[bytes]
    ) -> bool:
        """Verify against a bare public key hash with pre-expanded randomization elements."""
        self._check_length("public key hash", public_key_hash, self.hash_len)
        self._check_signature(message, signature)
        if len(randomization_elements) != self.num_signature_chunks:
            raise InvalidLengthError(
                f"expected {self.num_signature_chunks} randomization elements, "
                f"got {len(randomization_elements)}"
            )
        for element in randomization_elements:
            self._check_length("randomization element", element, self.hash_len)

        computed = wots_pk_from_sig(self.hash_funcs, signature, message, randomization_elements)
        valid = hmac.compare_digest(computed, public_key_hash)
        log.debug("WOTS+ verification %s", "succeeded" if valid else "failed")
        return valid

    def _check_signature(self, message: bytes, signature: Sequence[bytes]) -> None:
        self._check_length("message", message, self.message_len)
        if len(signature) != self.num_signature_chunks:
            raise InvalidLengthError(
                f"signature must have {self.num_signature_chunks} segments, got {len(signature)}"
            )
        for segment in signature:
            self._check_length("signature segment", segment, self.hash_len)
