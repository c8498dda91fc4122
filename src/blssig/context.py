"""Fixed BLS12-381 domain parameters, built once per process."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional

from py_ecc.optimized_bls12_381 import G1, G2, curve_order

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Hash-to-curve suite for signatures in G1 (IETF BLS ciphersuite, basic scheme).
DEFAULT_DST = b"BLS_SIG_BLS12381G1_XMD:SHA-256_SSWU_RO_NUL_"


@dataclass(frozen=True)
class GroupContext:
    g1: Any
    g2: Any
    order: int
    dst: bytes = DEFAULT_DST

    @classmethod
    def create(cls, dst: Optional[bytes] = None) -> "GroupContext":
        """Build an uncached context straight from py_ecc."""
        dst = DEFAULT_DST if dst is None else bytes(dst)
        if not dst or len(dst) > 255:
            raise ConfigurationError("Domain separation tag must be 1..255 bytes.")
        return cls(g1=G1, g2=G2, order=int(curve_order), dst=dst)


_lock = threading.Lock()
_context: Optional[GroupContext] = None


def initialize(dst: Optional[bytes] = None) -> GroupContext:
    """Return the process-wide context, creating it on first use.

    Safe under concurrent first use: exactly one context is ever published.
    Asking for a different DST after initialization is a configuration error.
    """
    global _context
    ctx = _context
    if ctx is None:
        with _lock:
            if _context is None:
                _context = GroupContext.create(dst)
                logger.debug("Initialized BLS12-381 context (dst=%r)", _context.dst)
            ctx = _context
    if dst is not None and bytes(dst) != ctx.dst:
        raise ConfigurationError(
            f"Context already initialized with dst={ctx.dst!r}; refusing {bytes(dst)!r}"
        )
    return ctx


def reset() -> None:
    """Forget the cached context. Only meant for tests."""
    global _context
    with _lock:
        _context = None


def resolve(ctx: Optional[GroupContext]) -> GroupContext:
    return ctx if ctx is not None else initialize()
