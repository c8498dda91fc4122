"""Exception hierarchy for the BLS signature package."""
from __future__ import annotations


class BlsSigError(Exception):
    """Base exception for all errors raised by blssig."""


class ConfigurationError(BlsSigError):
    """Raised when settings are missing or inconsistent."""


class RandomnessError(BlsSigError):
    """Raised when the system CSPRNG cannot produce a private scalar."""


class HashToCurveError(BlsSigError):
    """Raised when a message digest cannot be mapped onto G1."""


class PairingError(BlsSigError):
    """Raised when a point handed to verification is not a valid group element."""


class DecodeError(BlsSigError):
    """Base for errors raised while decoding keys or signatures."""


class FormatError(DecodeError):
    """Armor or DER container is malformed."""


class PointError(DecodeError):
    """Decoded scalar is out of range, or decoded point is off-curve / outside the subgroup."""


class StorageError(BlsSigError, OSError):
    """Raised when a storage slot cannot be read or written."""
