from __future__ import annotations

import argparse
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Patch

plt.rcParams.update({
    "font.size": 11,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "legend.fontsize": 10,
    "xtick.labelsize": 10,
    "ytick.labelsize": 10,
})

OP_ORDER = ["KeyGen", "DerivePK", "EncodeSK", "DecodeSK", "EncodePK", "DecodePK", "Sign", "Verify"]

# hatch maps (BW-friendly)
STAT_HATCHES = {
    "mean": "///",
    "p95": "xx",
}
SIZE_HATCHES = {
    "|sk| (PEM)": "///",
    "|pk| (PEM)": "\\\\\\",
    "|sig|": "xx",
}


def ns_to_ms(ns: float) -> float:
    return ns / 1e6


def _load_summary(path: str) -> pd.DataFrame:
    df = pd.read_csv(path)
    df["op"] = pd.Categorical(df["op"], categories=OP_ORDER, ordered=True)
    return df.sort_values("op")


def _save(fig, out_dir: str, stem: str):
    os.makedirs(out_dir, exist_ok=True)
    pdf_path = os.path.join(out_dir, f"{stem}.pdf")
    png_path = os.path.join(out_dir, f"{stem}.png")
    fig.savefig(pdf_path)
    fig.savefig(png_path, dpi=300)
    plt.close(fig)
    print(f"[{stem}] Saved to {pdf_path} and {png_path}")


def _hatch_bars(ax: plt.Axes, hatches: list[str]):
    for cont, hatch in zip(ax.containers, hatches):
        for p in cont.patches:
            p.set_hatch(hatch)
            p.set_facecolor("white")
            p.set_edgecolor("black")
            p.set_linewidth(0.8)


def plot_fig1_latency(df: pd.DataFrame, out_dir: str):
    """Fig.1: mean and p95 latency per operation, log scale (Verify dwarfs the codec ops)."""
    ops = [str(op) for op in df["op"]]
    mean_ms = df["mean_ns"].apply(ns_to_ms).to_numpy()
    p95_ms = df["p95_ns"].apply(ns_to_ms).to_numpy()

    x = np.arange(len(ops))
    width = 0.38

    fig, ax = plt.subplots(figsize=(7.5, 3.8))
    ax.bar(x - width / 2, mean_ms, width)
    ax.bar(x + width / 2, p95_ms, width)
    _hatch_bars(ax, [STAT_HATCHES["mean"], STAT_HATCHES["p95"]])

    ax.set_xticks(x)
    ax.set_xticklabels(ops, rotation=30, ha="right")
    ax.set_yscale("log")
    ax.set_ylabel("Latency (ms)")
    ax.set_title("BLS12-381 Operation Latency (py_ecc)")
    ax.grid(axis="y", which="both", linestyle="--", linewidth=0.5, alpha=0.7)

    handles = [
        Patch(facecolor="white", edgecolor="black", hatch=h, label=label)
        for label, h in STAT_HATCHES.items()
    ]
    ax.legend(handles=handles, frameon=False)

    fig.tight_layout()
    _save(fig, out_dir, "fig1_latency")


def plot_fig2_size_footprint(df: pd.DataFrame, out_dir: str):
    """Fig.2: artifact sizes in bytes (sizes are constant across ops)."""
    row = df.iloc[0]
    sizes = pd.Series({
        "|sk| (PEM)": int(row["sk_len_bytes"]),
        "|pk| (PEM)": int(row["pk_len_bytes"]),
        "|sig|": int(row["sig_len_bytes"]),
    })

    fig, ax = plt.subplots(figsize=(6.0, 2.8))
    sizes.plot(kind="barh", ax=ax, color="white", edgecolor="black")
    for p, label in zip(ax.patches, sizes.index):
        p.set_hatch(SIZE_HATCHES[label])

    ax.set_xlabel("Size (bytes)")
    ax.set_title("Size Footprint of Keys and Signature")
    ax.grid(axis="x", linestyle="--", linewidth=0.5, alpha=0.7)

    fig.tight_layout()
    _save(fig, out_dir, "fig2_size_footprint")


def main():
    ap = argparse.ArgumentParser(description="Plot benchmark summary figures.")
    ap.add_argument("--summary", default="bench/outputs/summary.csv")
    ap.add_argument("--out-dir", default="bench/figures")
    args = ap.parse_args()

    df = _load_summary(args.summary)
    plot_fig1_latency(df, args.out_dir)
    plot_fig2_size_footprint(df, args.out_dir)


if __name__ == "__main__":
    main()
