"""
WOTS+ error taxonomy.

Every exception raised by the package derives from WOTSPlusError. A failed
verification is not an error: verify() returns False.
"""


class WOTSPlusError(Exception):
    """Base class for all WOTS+ errors."""


class InvalidParameterError(WOTSPlusError, ValueError):
    """Construction-time parameters (hash length, chain length, names) are unusable."""


class InvalidLengthError(WOTSPlusError, ValueError):
    """A caller-supplied key, seed, message or signature has the wrong size."""


class ChainBoundsError(WOTSPlusError, AssertionError):
    """A chain walk would run past the end of the hash chain."""
