"""Demo: python -m blssig runs the generate/persist/sign/verify workflow."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import context
from .config import Settings, load_settings
from .errors import BlsSigError
from .log import configure
from .store import FileSlotStore
from .workflow import run_roundtrip

logger = logging.getLogger("blssig.demo")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="python -m blssig",
        description="Generate a BLS12-381 key pair, store it as PEM, sign and verify a message.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--private-key", default=settings.store.private_key_path, help="Private key slot file")
    ap.add_argument("--public-key", default=settings.store.public_key_path, help="Public key slot file")
    ap.add_argument("--message", default="bls", help="Message to sign")
    ap.add_argument("--verify-message", default=None, help="Message to verify against (default: --message)")
    ap.add_argument("--log-level", default=settings.logging.level, help="Logging level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
        args = build_parser(settings).parse_args(argv)

        settings.store.private_key_path = args.private_key
        settings.store.public_key_path = args.public_key
        settings.logging.level = args.log_level.upper()
        settings.validate()
        configure(settings.logging)

        ctx = context.initialize(settings.dst)
        store = FileSlotStore.from_settings(settings.store)
        verify_message = None if args.verify_message is None else args.verify_message.encode("utf-8")
        result = run_roundtrip(store, args.message.encode("utf-8"), verify_message, ctx)
    except BlsSigError as exc:
        logger.error("%s", exc)
        return 2

    if result.verified:
        logger.info("Verification passed")
        return 0
    logger.info("Verification failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
