"""BLS signatures over BLS12-381 with PEM-armored key files."""

from .codec import (
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode_private_key,
    encode_public_key,
    encode_signature,
)
from .context import GroupContext, initialize
from .errors import (
    BlsSigError,
    ConfigurationError,
    DecodeError,
    FormatError,
    HashToCurveError,
    PairingError,
    PointError,
    RandomnessError,
    StorageError,
)
from .keys import PrivateKey, PublicKey, Signature, derive_public_key, generate_private_key
from .scheme import sign, verify
from .store import PRIVATE_SLOT, PUBLIC_SLOT, FileSlotStore, MemorySlotStore
from .workflow import RoundTrip, run_roundtrip

__all__ = [
    "BlsSigError",
    "ConfigurationError",
    "DecodeError",
    "FileSlotStore",
    "FormatError",
    "GroupContext",
    "HashToCurveError",
    "MemorySlotStore",
    "PRIVATE_SLOT",
    "PUBLIC_SLOT",
    "PairingError",
    "PointError",
    "PrivateKey",
    "PublicKey",
    "RandomnessError",
    "RoundTrip",
    "Signature",
    "StorageError",
    "decode_private_key",
    "decode_public_key",
    "decode_signature",
    "derive_public_key",
    "encode_private_key",
    "encode_public_key",
    "encode_signature",
    "generate_private_key",
    "initialize",
    "run_roundtrip",
    "sign",
    "verify",
]
