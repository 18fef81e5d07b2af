"""
WOTS+ Utility Functions

Byte and integer conversions shared by the encoder and the chain function.
"""

from typing import List

from .errors import InvalidLengthError


def to_byte(x: int, n: int) -> bytes:
    """
    Converts a non-negative integer x to a byte string of length n.
    Uses big-endian byte order; higher bits are dropped.
    """
    result = bytearray(n)
    for i in range(n - 1, -1, -1):
        result[i] = x & 0xff
        x >>= 8
    return bytes(result)


def base_2b(x: bytes, b: int, out_len: int) -> List[int]:
    """
    Computes the base-2^b representation of X, most significant bits first.

    Args:
        x: Input byte string
        b: Number of bits per output element
        out_len: Number of output elements

    Returns:
        List of out_len integers, each in range [0, 2^b - 1]
    """
    in_bits = 0
    bits = 0
    result = []
    mask = (1 << b) - 1

    byte_idx = 0
    for _ in range(out_len):
        while bits < b:
            in_bits = (in_bits << 8) | x[byte_idx]
            byte_idx += 1
            bits += 8
        bits -= b
        result.append((in_bits >> bits) & mask)

    return result


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte strings of equal length."""
    if len(a) != len(b):
        raise InvalidLengthError(f"Cannot XOR {len(a)}-byte and {len(b)}-byte values")
    return bytes(x ^ y for x, y in zip(a, b))


def concat(*args: bytes) -> bytes:
    """Concatenate multiple byte strings."""
    return b"".join(args)
