from __future__ import annotations

import argparse
import csv
import glob
import math
import os
import statistics
from collections import defaultdict
from typing import Dict, Iterable, List

RAW_COLUMNS = {"op", "warmup", "elapsed_ns", "sk_len_bytes", "pk_len_bytes", "sig_len_bytes"}
SIZE_COLUMNS = ["sk_len_bytes", "pk_len_bytes", "sig_len_bytes"]
STAT_COLUMNS = ["n", "mean_ns", "median_ns", "p95_ns", "p99_ns", "min_ns", "max_ns"]


def _nearest_rank(sorted_ns: List[int], q: float) -> int:
    return sorted_ns[max(0, math.ceil(q * len(sorted_ns)) - 1)]


def _rows(paths: Iterable[str], include_warmup: bool):
    for path in paths:
        with open(path, newline="") as f:
            reader = csv.DictReader(f)
            missing = RAW_COLUMNS - set(reader.fieldnames or [])
            if missing:
                raise ValueError(f"{path}: missing columns {sorted(missing)}")
            for d in reader:
                if include_warmup or d["warmup"] == "0":
                    yield d


def summarize_op(rows: List[dict]) -> Dict[str, int]:
    """Latency stats for one op; PEM sizes vary with the scalar, so keep the largest."""
    ns = sorted(int(d["elapsed_ns"]) for d in rows)
    summary = {
        "n": len(ns),
        "mean_ns": round(statistics.fmean(ns)),
        "median_ns": round(statistics.median(ns)),
        "p95_ns": _nearest_rank(ns, 0.95),
        "p99_ns": _nearest_rank(ns, 0.99),
        "min_ns": ns[0],
        "max_ns": ns[-1],
    }
    for col in SIZE_COLUMNS:
        summary[col] = max(int(d[col]) for d in rows)
    return summary


def main() -> None:
    ap = argparse.ArgumentParser(description="Summarize raw BLS bench CSVs per operation.")
    ap.add_argument("--in", dest="inputs", nargs="*", default=None)
    ap.add_argument("--glob", dest="globpat", default="bench/outputs/out*.csv")
    ap.add_argument("--out", default="bench/outputs/summary.csv")
    ap.add_argument("--include-warmup", action="store_true")
    args = ap.parse_args()

    paths = args.inputs or sorted(glob.glob(args.globpat))
    if not paths:
        raise SystemExit(f"No input CSVs match {args.globpat!r}.")

    by_op: Dict[str, List[dict]] = defaultdict(list)
    for d in _rows(paths, args.include_warmup):
        by_op[d["op"]].append(d)

    if os.path.dirname(args.out):
        os.makedirs(os.path.dirname(args.out), exist_ok=True)
    with open(args.out, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["op", *STAT_COLUMNS, *SIZE_COLUMNS])
        w.writeheader()
        for op in sorted(by_op):
            w.writerow({"op": op, **summarize_op(by_op[op])})

    print(f"Wrote {args.out} ({len(by_op)} ops from {len(paths)} file(s))")


if __name__ == "__main__":
    main()
