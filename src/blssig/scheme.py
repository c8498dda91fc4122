"""BLS signing and verification (signatures in G1, public keys in G2).

    sign:    S := x * H(m)
    verify:  e(S, g2) == e(H(m), P)

Bilinearity gives e(x*H, g2) = e(H, g2)^x = e(H, x*g2), so the equality
holds exactly when S was produced with the scalar behind P.
"""
from __future__ import annotations

from typing import Optional

from py_ecc.optimized_bls12_381 import multiply, pairing

from .context import GroupContext, resolve
from .errors import PairingError
from .hashing import hash_message
from .keys import PrivateKey, PublicKey, Signature
from .points import canonical, is_valid_g1, is_valid_g2


def sign(sk: PrivateKey, message: bytes, ctx: Optional[GroupContext] = None) -> Signature:
    ctx = resolve(ctx)
    sk.check_range(ctx)
    H = hash_message(message, ctx)
    return Signature(canonical(multiply(H, sk.x)))


def verify(
    sig: Signature,
    pk: PublicKey,
    message: bytes,
    ctx: Optional[GroupContext] = None,
) -> bool:
    """Return True iff sig is a valid signature on message under pk.

    A mismatch is a normal False. Points that are not group elements raise
    PairingError instead of being passed to the pairing.
    """
    ctx = resolve(ctx)
    if not is_valid_g1(sig.point):
        raise PairingError("signature is not a point of the G1 subgroup")
    if not is_valid_g2(pk.point):
        raise PairingError("public key is not a point of the G2 subgroup")
    if pk.is_identity:
        return False

    H = hash_message(message, ctx)
    # py_ecc takes (G2 point, G1 point)
    left = pairing(ctx.g2, sig.point)
    right = pairing(pk.point, H)
    return left == right
