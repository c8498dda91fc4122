from __future__ import annotations

from typing import Any

from py_ecc.bls.point_compression import (
    compress_G1,
    compress_G2,
    decompress_G1,
    decompress_G2,
)
from py_ecc.optimized_bls12_381 import (
    FQ,
    FQ2,
    b,
    b2,
    curve_order,
    is_inf,
    is_on_curve,
    multiply,
    normalize,
)

from .errors import PointError

# ----------------------------
# Point representation
# - py_ecc optimized arithmetic works on Jacobian points (x, y, z).
# - We keep every stored point normalized (z == 1, or the canonical
#   infinity) so dataclass equality compares affine coordinates and the
#   point can go straight back into add/multiply/pairing.
# ----------------------------

G1_COMPRESSED_LEN = 48  # BLS12-381 G1 compressed size
G2_COMPRESSED_LEN = 96  # BLS12-381 G2 compressed size (c1 || c0, flags in c1)


def canonical(P):
    """Normalize a Jacobian point to z == 1; infinity becomes (1, 1, 0)."""
    if is_inf(P):
        zero = P[2]
        return (zero.one(), zero.one(), zero)
    x, y = normalize(P)
    return (x, y, x.one())


def _is_point_of(P: Any, field: type) -> bool:
    return (
        isinstance(P, tuple)
        and len(P) == 3
        and all(isinstance(c, field) for c in P)
    )


def in_subgroup(P) -> bool:
    """r * P == O, i.e. P lies in the prime-order subgroup."""
    return is_inf(multiply(P, curve_order))


def is_valid_g1(P) -> bool:
    return _is_point_of(P, FQ) and is_on_curve(P, b) and in_subgroup(P)


def is_valid_g2(P) -> bool:
    return _is_point_of(P, FQ2) and is_on_curve(P, b2) and in_subgroup(P)


def g1_to_bytes(P) -> bytes:
    return int(compress_G1(P)).to_bytes(G1_COMPRESSED_LEN, "big")


def g2_to_bytes(P) -> bytes:
    z1, z2 = compress_G2(P)
    return int(z1).to_bytes(48, "big") + int(z2).to_bytes(48, "big")


def g1_from_bytes(buf: bytes):
    """Decompress and validate a G1 point. Raises PointError on any defect."""
    if len(buf) != G1_COMPRESSED_LEN:
        raise PointError(f"G1 point must be {G1_COMPRESSED_LEN} bytes, got {len(buf)}")
    try:
        P = decompress_G1(int.from_bytes(buf, "big"))
    except ValueError as exc:
        raise PointError(f"invalid G1 encoding: {exc}") from exc
    if not is_on_curve(P, b):
        raise PointError("G1 point is not on the curve")
    if not in_subgroup(P):
        raise PointError("G1 point is not in the order-r subgroup")
    return canonical(P)


def g2_from_bytes(buf: bytes):
    """Decompress and validate a G2 point. Raises PointError on any defect."""
    if len(buf) != G2_COMPRESSED_LEN:
        raise PointError(f"G2 point must be {G2_COMPRESSED_LEN} bytes, got {len(buf)}")
    z1 = int.from_bytes(buf[:48], "big")
    z2 = int.from_bytes(buf[48:], "big")
    try:
        P = decompress_G2((z1, z2))
    except ValueError as exc:
        raise PointError(f"invalid G2 encoding: {exc}") from exc
    if not is_on_curve(P, b2):
        raise PointError("G2 point is not on the twisted curve")
    if not in_subgroup(P):
        raise PointError("G2 point is not in the order-r subgroup")
    return canonical(P)
