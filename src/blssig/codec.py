"""Key and signature serialization.

Private key file:  PEM "PRIVATE KEY" around DER SEQUENCE { INTEGER x }
Public key file:   PEM "PUBLIC KEY"  around DER SEQUENCE { OCTET STRING (96 bytes) }
Signature:         raw 48-byte compressed G1 point

Decoding validates everything a key will later be trusted for: the
scalar range, and for points the encoding length, curve membership and
subgroup order. Decode errors are FormatError (armor/container) or
PointError (scalar/point).
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from . import der, pem
from .context import GroupContext, resolve
from .errors import DecodeError, PointError
from .keys import PrivateKey, PublicKey, Signature
from .points import (
    G2_COMPRESSED_LEN,
    g1_from_bytes,
    g1_to_bytes,
    g2_from_bytes,
    g2_to_bytes,
)

logger = logging.getLogger(__name__)

PRIVATE_KEY_LABEL = "PRIVATE KEY"
PUBLIC_KEY_LABEL = "PUBLIC KEY"

Armored = Union[bytes, str]


def encode_private_key(sk: PrivateKey) -> bytes:
    return pem.armor(PRIVATE_KEY_LABEL, der.encode_integer_sequence(sk.x))


def decode_private_key(data: Armored, ctx: Optional[GroupContext] = None) -> PrivateKey:
    ctx = resolve(ctx)
    try:
        x = der.decode_integer_sequence(pem.unarmor(data, PRIVATE_KEY_LABEL))
        if not 0 < x < ctx.order:
            raise PointError("private scalar out of range [1, r)")
        return PrivateKey(x)
    except DecodeError as exc:
        logger.debug("Rejected private key: %s", exc)
        raise


def encode_public_key(pk: PublicKey) -> bytes:
    return pem.armor(PUBLIC_KEY_LABEL, der.encode_octets_sequence(g2_to_bytes(pk.point)))


def decode_public_key(data: Armored) -> PublicKey:
    try:
        raw = der.decode_octets_sequence(pem.unarmor(data, PUBLIC_KEY_LABEL))
        if len(raw) != G2_COMPRESSED_LEN:
            raise PointError(
                f"public key must be {G2_COMPRESSED_LEN} bytes, got {len(raw)}"
            )
        pk = PublicKey(g2_from_bytes(raw))
        if pk.is_identity:
            raise PointError("public key is the identity point")
        return pk
    except DecodeError as exc:
        logger.debug("Rejected public key: %s", exc)
        raise


def encode_signature(sig: Signature) -> bytes:
    return g1_to_bytes(sig.point)


def decode_signature(data: bytes) -> Signature:
    return Signature(g1_from_bytes(bytes(data)))
