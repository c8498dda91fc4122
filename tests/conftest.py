"""Shared pytest fixtures for the blssig test-suite."""
from __future__ import annotations

import logging
from typing import Tuple

import pytest
from py_ecc.bls.point_compression import decompress_G1, decompress_G2

from blssig import context
from blssig.keys import PrivateKey, PublicKey, derive_public_key, generate_private_key
from blssig.points import in_subgroup

C_FLAG = 1 << 383


@pytest.fixture(scope="session")
def ctx() -> context.GroupContext:
    return context.initialize()


@pytest.fixture(scope="session")
def keypair(ctx) -> Tuple[PrivateKey, PublicKey]:
    sk = generate_private_key(ctx)
    return sk, derive_public_key(sk, ctx)


@pytest.fixture(scope="session")
def other_keypair(ctx, keypair) -> Tuple[PrivateKey, PublicKey]:
    sk = generate_private_key(ctx)
    while sk == keypair[0]:
        sk = generate_private_key(ctx)
    return sk, derive_public_key(sk, ctx)


def off_subgroup_g1_bytes() -> bytes:
    """48-byte compressed G1 encoding of a point on the curve but outside the r-torsion."""
    for x in range(1, 1000):
        z = C_FLAG | x
        try:
            P = decompress_G1(z)
        except ValueError:
            continue
        if not in_subgroup(P):
            return z.to_bytes(48, "big")
    raise AssertionError("no off-subgroup G1 point found")


def off_subgroup_g2_bytes() -> bytes:
    """96-byte compressed G2 encoding of a twist point outside the r-torsion."""
    for x in range(1, 1000):
        z1, z2 = C_FLAG, x  # x = x + 0*u
        try:
            P = decompress_G2((z1, z2))
        except ValueError:
            continue
        if not in_subgroup(P):
            return z1.to_bytes(48, "big") + z2.to_bytes(48, "big")
    raise AssertionError("no off-subgroup G2 point found")


@pytest.fixture()
def package_logger():
    """Restore the blssig logger after code that calls log.configure()."""
    logger = logging.getLogger("blssig")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
