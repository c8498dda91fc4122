from __future__ import annotations

from hashlib import sha256
from typing import Optional

from py_ecc.bls.hash_to_curve import hash_to_G1
from py_ecc.optimized_bls12_381 import b, is_inf, is_on_curve

from .context import GroupContext, resolve
from .errors import HashToCurveError
from .points import canonical


def message_digest(message: bytes) -> bytes:
    """SHA-256 of the message; the 32-byte digest is what gets mapped to G1."""
    if isinstance(message, str):
        raise TypeError("message must be bytes, not str")
    return sha256(bytes(message)).digest()


def hash_message(message: bytes, ctx: Optional[GroupContext] = None):
    """H(m) := hash_to_G1(SHA-256(m), DST) using SSWU + SHA-256 expand_message_xmd."""
    ctx = resolve(ctx)
    digest = message_digest(message)
    try:
        H = hash_to_G1(digest, ctx.dst, sha256)
    except ValueError as exc:
        raise HashToCurveError(f"hash_to_G1 failed: {exc}") from exc
    if is_inf(H) or not is_on_curve(H, b):
        raise HashToCurveError("hash_to_G1 produced an invalid point")
    return canonical(H)
