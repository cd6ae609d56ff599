import os, sys, argparse
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
import imageio

from nntsp import TSPInstance, TourBuilder, read_points


def draw_panel(ax, coords, path, title, subtitle):
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]
    ax.plot(cx, cy, "o")  # cities
    if path is not None and len(path) > 1:
        ax.plot([p[0] for p in path], [p[1] for p in path], "-")
    ax.plot([coords[0][0]], [coords[0][1]], "s")  # start
    ax.set_title(title + "\n" + subtitle, pad=10)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xticks([])
    ax.set_yticks([])


def fig_to_frame(fig):
    fig.canvas.draw()
    return np.asarray(fig.canvas.buffer_rgba())[..., :3].copy()


def make_construction_gif(coords, result, out_gif, step=1, duration=0.3):
    """One frame per ``step`` hops of the construction, plus the closed tour at the end."""
    n_edges = len(result.order) - 1
    hops = list(range(1, n_edges + 1, step))
    if not hops or hops[-1] != n_edges:
        hops.append(n_edges)

    Path(out_gif).parent.mkdir(parents=True, exist_ok=True)
    with imageio.get_writer(out_gif, mode="I", duration=duration) as writer:
        for k in hops:
            fig = plt.figure(figsize=(5.8, 5.8))
            path = result.tour[:k + 1]
            title = f"Nearest neighbour: edge {k}/{n_edges}"
            subtitle = f"length so far = {result.history_lengths[k - 1]:.2f}"
            draw_panel(plt.gca(), coords, path, title, subtitle)
            fig.tight_layout(rect=[0, 0, 1, 0.94])
            writer.append_data(fig_to_frame(fig))
            plt.close(fig)
    return out_gif


def save_final(coords, result, out_png):
    """Save a single PNG with the closed tour."""
    fig = plt.figure(figsize=(5.8, 5.8))
    draw_panel(plt.gca(), coords, result.tour, "Nearest neighbour: final",
               f"length = {result.total_distance:.2f}")
    fig.tight_layout(rect=[0, 0, 1, 0.94])
    Path(out_png).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_png, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_png


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--points", default=None, help="points file; random instance if omitted")
    p.add_argument("--n", type=int, default=40, help="number of random cities")
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=1, help="frame every k edges")
    args = p.parse_args(argv)

    if args.step < 1:
        p.error("--step must be >= 1")

    try:
        if args.points:
            coords = read_points(args.points)
            tag = Path(args.points).stem
        else:
            inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square,
                                                name=f"viz{args.n}")
            coords = inst.coords
            tag = inst.name
        result = TourBuilder(coords).run()
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    os.makedirs(args.outdir, exist_ok=True)
    gif_path = make_construction_gif(coords, result, os.path.join(args.outdir, f"{tag}_construction.gif"),
                                     step=args.step)
    print("Saved:", gif_path)
    png_path = save_final(coords, result, os.path.join(args.outdir, f"{tag}_final.png"))
    print("Saved:", png_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
