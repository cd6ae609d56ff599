from __future__ import annotations
import statistics, os
from typing import Dict, Any, List, Tuple, Optional
from dataclasses import dataclass
import csv
from .tsp import TSPInstance
from .nearest_neighbor import TourBuilder, TourResult


@dataclass
class ExperimentConfig:
    n_runs: int = 10
    square_size: float = 100.0
    base_seed: int = 42

    def __post_init__(self):
        if self.n_runs < 1:
            raise ValueError("n_runs must be >= 1.")
        if self.square_size <= 0:
            raise ValueError("square_size must be > 0.")


def run_repeated_trials(n: int, cfg: Optional[ExperimentConfig] = None) -> Tuple[Dict[str, Any], List[TourResult]]:
    """Build NN tours on ``cfg.n_runs`` random instances of ``n`` points (one seed per run)."""
    cfg = cfg or ExperimentConfig()
    results = []
    for r in range(cfg.n_runs):
        inst = TSPInstance.random_euclidean(n, seed=cfg.base_seed + r, square_size=cfg.square_size,
                                            name=f"random{n}_s{cfg.base_seed + r}")
        results.append(TourBuilder(inst.coords).run())
    lengths = [res.total_distance for res in results]
    times = [res.elapsed_sec for res in results]
    stats = {
        "n": n,
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "n_runs": cfg.n_runs,
    }
    return stats, results


def run_size_sweep(sizes: List[int], cfg: Optional[ExperimentConfig] = None,
                   csv_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Repeated trials for each instance size; rows are appended to ``csv_path`` if given."""
    cfg = cfg or ExperimentConfig()
    rows = []
    for n in sizes:
        stats, _ = run_repeated_trials(n, cfg)
        row = {"square_size": cfg.square_size, **stats}
        rows.append(row)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=row.keys())
                if write_header:
                    w.writeheader()
                w.writerow(row)
    return rows
