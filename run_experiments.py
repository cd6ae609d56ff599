# run_experiments.py
import os, sys, json, argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from nntsp import ExperimentConfig, run_size_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))
# Beardwood-Halton-Hammersley constant: optimal tour ~ BHH * sqrt(n * area)
BHH = 0.7124


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def parse_list_ints(s):
    return [int(x.strip()) for x in s.split(",") if x.strip()]


def plot_length_vs_n(df, square_size, save_path):
    plt.figure()
    n = df["n"].to_numpy(dtype=float)
    plt.errorbar(n, df["mean_length"], yerr=df["std_length"], fmt="o-", label="nearest neighbour")
    plt.plot(n, BHH * np.sqrt(n * square_size ** 2), "--", label="BHH estimate of optimum")
    plt.xlabel("Number of points")
    plt.ylabel("Tour length")
    plt.title("Tour length vs. instance size")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_time_vs_n(df, save_path):
    plt.figure()
    n = df["n"].to_numpy(dtype=float)
    t = df["mean_time"].to_numpy(dtype=float)
    plt.loglog(n, t, "o-", label="measured")
    # quadratic reference anchored at the largest instance
    if t[-1] > 0:
        plt.loglog(n, t[-1] * (n / n[-1]) ** 2, "--", label="O(n^2)")
    plt.xlabel("Number of points")
    plt.ylabel("Mean build time [s]")
    plt.title("Construction time vs. instance size")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--sizes", default="10,25,50,100,200,400")
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--outdir", default=OUTDIR)
    args = ap.parse_args(argv)

    sizes = parse_list_ints(args.sizes)
    if not sizes or min(sizes) < 1:
        ap.error("--sizes must list positive integers")
    try:
        cfg = ExperimentConfig(n_runs=args.runs, square_size=args.square, base_seed=args.seed)
    except ValueError as err:
        ap.error(str(err))

    print(f"Size sweep over {sizes} with {cfg.n_runs} runs each...", flush=True)
    rows = run_size_sweep(sizes, cfg)
    for row in rows:
        print(json.dumps(row, indent=2))

    df = pd.DataFrame.from_records(rows).sort_values("n")
    df["bhh_ratio"] = df["mean_length"] / (BHH * np.sqrt(df["n"] * cfg.square_size ** 2))
    summary_csv = ensure(os.path.join(args.outdir, "results_summary.csv"))
    df.to_csv(summary_csv, index=False)
    print("Saved:", summary_csv)

    length_png = os.path.join(args.outdir, "length_vs_n.png")
    plot_length_vs_n(df, cfg.square_size, length_png)
    print("Saved:", length_png)
    time_png = os.path.join(args.outdir, "time_vs_n.png")
    plot_time_vs_n(df, time_png)
    print("Saved:", time_png)
    return 0


if __name__ == "__main__":
    sys.exit(main())
