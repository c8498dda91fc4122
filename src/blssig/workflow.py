"""The canonical usage order of the library, shared by the demo and the tests."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .codec import (
    decode_private_key,
    decode_public_key,
    encode_private_key,
    encode_public_key,
)
from .context import GroupContext, resolve
from .interfaces import SlotStore
from .keys import PrivateKey, PublicKey, Signature, derive_public_key, generate_private_key
from .scheme import sign, verify
from .store import PRIVATE_SLOT, PUBLIC_SLOT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundTrip:
    private_key: PrivateKey
    public_key: PublicKey
    signature: Signature
    verified: bool


def run_roundtrip(
    store: SlotStore,
    message: bytes = b"bls",
    verify_message: Optional[bytes] = None,
    ctx: Optional[GroupContext] = None,
) -> RoundTrip:
    """Generate, persist, reload, sign, verify.

    1. sk <- generate; write encode(sk) to the private slot; read it back.
    2. pk := derive(sk); write encode(pk) to the public slot; read it back.
    3. sig := sign(sk', message) with the reloaded private key.
    4. verify(sig, pk', verify_message or message) with the reloaded public key.
    """
    ctx = resolve(ctx)
    if verify_message is None:
        verify_message = message

    sk = generate_private_key(ctx)
    store.write(PRIVATE_SLOT, encode_private_key(sk))
    sk_loaded = decode_private_key(store.read(PRIVATE_SLOT), ctx)

    pk = derive_public_key(sk, ctx)
    store.write(PUBLIC_SLOT, encode_public_key(pk))
    pk_loaded = decode_public_key(store.read(PUBLIC_SLOT))

    sig = sign(sk_loaded, message, ctx)
    ok = verify(sig, pk_loaded, verify_message, ctx)
    logger.info("Signature on %r %s", verify_message, "verified" if ok else "did not verify")
    return RoundTrip(private_key=sk_loaded, public_key=pk_loaded, signature=sig, verified=ok)
