from __future__ import annotations

import pytest
from py_ecc.optimized_bls12_381 import G2, multiply

from blssig import keys
from blssig.errors import PointError, RandomnessError
from blssig.keys import PrivateKey, derive_public_key, generate_private_key
from blssig.points import canonical


def test_generated_scalars_are_nonzero_and_below_order(ctx):
    for _ in range(200):
        sk = generate_private_key(ctx)
        assert 0 < sk.x < ctx.order


def test_zero_draw_is_resampled(ctx, monkeypatch):
    draws = iter([0, 0, 7])
    monkeypatch.setattr(keys.secrets, "randbelow", lambda n: next(draws))
    assert generate_private_key(ctx).x == 7


def test_missing_entropy_raises_randomness_error(ctx, monkeypatch):
    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr(keys.secrets, "randbelow", broken)
    with pytest.raises(RandomnessError):
        generate_private_key(ctx)


def test_derive_public_key_is_scalar_times_g2(ctx):
    sk = PrivateKey(5)
    assert derive_public_key(sk, ctx).point == canonical(multiply(G2, 5))
    assert derive_public_key(PrivateKey(1), ctx).point == canonical(G2)


def test_derive_public_key_is_deterministic(ctx, keypair):
    sk, pk = keypair
    assert derive_public_key(PrivateKey(sk.x), ctx) == pk
    assert not pk.is_identity


@pytest.mark.parametrize("bad", [0, -1, True, 1.5, "12"])
def test_private_key_rejects_invalid_scalars(bad):
    with pytest.raises(PointError):
        PrivateKey(bad)


def test_derive_rejects_scalar_at_or_above_order(ctx):
    with pytest.raises(PointError):
        derive_public_key(PrivateKey(ctx.order), ctx)


def test_private_key_repr_hides_scalar():
    assert "123456789" not in repr(PrivateKey(123456789))
