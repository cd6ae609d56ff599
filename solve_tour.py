# solve_tour.py
# Read points, build the nearest-neighbour tour, print path / length / time.
#
# Usage:
#   python solve_tour.py data5.txt
#   cat points.txt | python solve_tour.py -
#   python solve_tour.py --random 200 --seed 7 --plot tour.png --save-points pts.txt
#
import sys
import time
import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from nntsp import TSPInstance, build_tour, read_points, write_points, print_report


def plot_tour(coords, tour, total_distance, out_png, title="Nearest-neighbour tour"):
    fig, ax = plt.subplots(figsize=(5.8, 5.8))
    ax.plot([c[0] for c in coords], [c[1] for c in coords], "o")
    ax.plot([p[0] for p in tour], [p[1] for p in tour], "-")
    ax.plot([tour[0][0]], [tour[0][1]], "s", label="start")
    ax.set_title(f"{title}\nlength = {total_distance:.2f}")
    ax.set_aspect("equal", adjustable="box")
    ax.legend(loc="best")
    Path(out_png).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_png, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_png


def load_points(args):
    if args.random is not None:
        inst = TSPInstance.random_euclidean(n=args.random, seed=args.seed, square_size=args.square)
        return inst.coords
    if args.points_file == "-":
        return read_points(sys.stdin, allow_non_finite=args.allow_non_finite)
    return read_points(args.points_file, allow_non_finite=args.allow_non_finite)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Nearest-neighbour TSP tour over 2D points.")
    ap.add_argument("points_file", nargs="?", help="file with one 'x y' pair per line ('-' for stdin)")
    ap.add_argument("--random", type=int, default=None, metavar="N", help="use N random points instead of a file")
    ap.add_argument("--seed", type=int, default=None, help="seed for --random")
    ap.add_argument("--square", type=float, default=100.0, help="square size for --random")
    ap.add_argument("--allow-non-finite", action="store_true", help="accept nan/inf coordinates")
    ap.add_argument("--plot", default=None, metavar="PNG", help="also save a plot of the tour")
    ap.add_argument("--save-points", default=None, metavar="TXT", help="write the points used (e.g. a --random instance)")
    args = ap.parse_args(argv)

    if args.random is None and args.points_file is None:
        ap.error("a points file or --random N is required")

    start = time.time()
    try:
        points = load_points(args)
        tour, total_distance = build_tour(points)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    elapsed = time.time() - start

    print_report(tour, total_distance, elapsed)
    if args.plot:
        plot_tour(points, tour, total_distance, args.plot)
        print("Saved:", args.plot)
    if args.save_points:
        print("Saved:", write_points(args.save_points, points))
    return 0


if __name__ == "__main__":
    sys.exit(main())
