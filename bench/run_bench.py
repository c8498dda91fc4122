from __future__ import annotations

import argparse
import csv
import os
import time
from dataclasses import dataclass
from typing import Callable

from blssig import context
from blssig.codec import (
    decode_private_key,
    decode_public_key,
    encode_private_key,
    encode_public_key,
    encode_signature,
)
from blssig.keys import derive_public_key, generate_private_key
from blssig.scheme import sign, verify

FIELDNAMES = [
    "op",
    "warmup",
    "rep",
    "elapsed_ns",
    "sk_len_bytes",
    "pk_len_bytes",
    "sig_len_bytes",
]


@dataclass(frozen=True)
class BenchConfig:
    warmup: int
    reps: int
    out: str
    message: bytes


def _timed_ns(fn: Callable[[], object]) -> tuple[int, object]:
    t0 = time.perf_counter_ns()
    result = fn()
    return time.perf_counter_ns() - t0, result


def run(cfg: BenchConfig) -> None:
    ctx = context.initialize()
    out_dir = os.path.dirname(cfg.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(cfg.out, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()

        for i in range(cfg.warmup + cfg.reps):
            is_warmup = 1 if i < cfg.warmup else 0
            rep = i if is_warmup else i - cfg.warmup
            rows = []

            t, sk = _timed_ns(lambda: generate_private_key(ctx))
            rows.append(("KeyGen", t))
            t, pk = _timed_ns(lambda: derive_public_key(sk, ctx))
            rows.append(("DerivePK", t))

            t, sk_pem = _timed_ns(lambda: encode_private_key(sk))
            rows.append(("EncodeSK", t))
            t, sk2 = _timed_ns(lambda: decode_private_key(sk_pem, ctx))
            rows.append(("DecodeSK", t))

            t, pk_pem = _timed_ns(lambda: encode_public_key(pk))
            rows.append(("EncodePK", t))
            t, pk2 = _timed_ns(lambda: decode_public_key(pk_pem))
            rows.append(("DecodePK", t))

            t, sig = _timed_ns(lambda: sign(sk2, cfg.message, ctx))
            rows.append(("Sign", t))
            t, ok = _timed_ns(lambda: verify(sig, pk2, cfg.message, ctx))
            rows.append(("Verify", t))

            if not ok:
                raise AssertionError(f"signature failed to verify at rep {rep}")

            sizes = {
                "sk_len_bytes": len(sk_pem),
                "pk_len_bytes": len(pk_pem),
                "sig_len_bytes": len(encode_signature(sig)),
            }
            for op, elapsed in rows:
                w.writerow({"op": op, "warmup": is_warmup, "rep": rep, "elapsed_ns": elapsed, **sizes})

    print(f"Wrote: {cfg.out}")


def main() -> None:
    ap = argparse.ArgumentParser(description="BLS12-381 signature benchmark harness.")
    ap.add_argument("--warmup", type=int, default=2)
    ap.add_argument("--reps", type=int, default=20)
    ap.add_argument("--out", type=str, default="bench/outputs/out.csv")
    ap.add_argument("--message", type=str, default="bls")
    args = ap.parse_args()

    run(
        BenchConfig(
            warmup=args.warmup,
            reps=args.reps,
            out=args.out,
            message=args.message.encode(),
        )
    )


if __name__ == "__main__":
    main()
