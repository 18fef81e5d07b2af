"""
WOTS+ Message Encoding

Maps an m-byte message digest to the chain index vector: len1 base-w digits of
the message followed by len2 base-w digits of its checksum.
"""

from typing import List, Sequence

from .errors import InvalidLengthError
from .parameters import WOTSPlusParameterSet
from .utils import base_2b


def to_base_w(message: bytes, params: WOTSPlusParameterSet, num_chunks: int) -> List[int]:
    """
    Convert a message to base-w digits, most significant digit first.

    For w=16 each byte yields its high nibble then its low nibble.
    """
    if num_chunks * params.lg_w > 8 * len(message):
        raise InvalidLengthError(
            f"{len(message)}-byte message cannot supply {num_chunks} base-{params.w} digits"
        )
    return base_2b(message, params.lg_w, num_chunks)


def checksum(message_digits: Sequence[int], params: WOTSPlusParameterSet) -> List[int]:
    """
    Compute the checksum digits for a base-w message.

    csum = sum(w - 1 - digit), written as len2 big-endian base-w digits.
    """
    csum = 0
    for digit in message_digits:
        csum += params.w - 1 - digit

    mask = params.w - 1
    return [
        (csum >> ((params.len2 - 1 - i) * params.lg_w)) & mask
        for i in range(params.len2)
    ]


def compute_chain_indexes(message: bytes, params: WOTSPlusParameterSet) -> List[int]:
    """Message digits followed by checksum digits, len_total entries in [0, w-1]."""
    msg = to_base_w(message, params, params.len1)
    return msg + checksum(msg, params)
