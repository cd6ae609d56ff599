from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, Tuple, Optional

Point = Tuple[float, float]


def euclidean(p1: Point, p2: Point) -> float:
    dx, dy = p2[0] - p1[0], p2[1] - p1[1]
    return math.sqrt(dx * dx + dy * dy)


@dataclass
class TSPInstance:
    coords: List[Point]
    name: str = "euclidean_tsp"

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0, name: str = "random_euclidean"):
        if n < 1:
            raise ValueError("An instance needs at least one point.")
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return TSPInstance(coords=coords, name=name)
