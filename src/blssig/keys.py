from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Any, Optional

from py_ecc.optimized_bls12_381 import is_inf, multiply

from .context import GroupContext, resolve
from .errors import PointError, RandomnessError
from .points import canonical

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrivateKey:
    """Secret scalar x with 0 < x < r."""

    x: int = field(repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.x, bool) or not isinstance(self.x, int):
            raise PointError("private scalar must be an int")
        if self.x <= 0:
            raise PointError("private scalar must be positive")

    def check_range(self, ctx: GroupContext) -> None:
        if not 0 < self.x < ctx.order:
            raise PointError("private scalar out of range [1, r)")


@dataclass(frozen=True)
class PublicKey:
    """P = x * g2, canonical (z == 1) G2 point."""

    point: Any

    @property
    def is_identity(self) -> bool:
        return is_inf(self.point)


@dataclass(frozen=True)
class Signature:
    """S = x * H(m), canonical G1 point."""

    point: Any


# ----------------------------
# Sampler for secret keys in Z_r^*
# ----------------------------

def _randbelow(order: int) -> int:
    try:
        return secrets.randbelow(order)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessError("system CSPRNG unavailable") from exc


def generate_private_key(ctx: Optional[GroupContext] = None) -> PrivateKey:
    """Uniform x in [0, r), resampled until nonzero."""
    ctx = resolve(ctx)
    while True:
        x = _randbelow(ctx.order)
        if x != 0:
            return PrivateKey(x)
        logger.debug("Sampled zero scalar, resampling")


# ----------------------------
# KeyGen(x) = x * G2
# Not constant time: py_ecc's double-and-add branches on the bits of x.
# ----------------------------

def derive_public_key(sk: PrivateKey, ctx: Optional[GroupContext] = None) -> PublicKey:
    ctx = resolve(ctx)
    sk.check_range(ctx)
    return PublicKey(canonical(multiply(ctx.g2, sk.x)))
