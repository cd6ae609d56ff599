from __future__ import annotations
import math
import time
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .tsp import Point, euclidean


@dataclass
class TourResult:
    tour: List[Point]
    order: List[int]
    total_distance: float
    elapsed_sec: float
    # running length after each hop; the last entry includes the closing edge
    history_lengths: List[float] = field(default_factory=list)


class TourBuilder:
    """Greedy nearest-neighbour tour starting and ending at the first point.

    Each step scans the unvisited points in index order and moves to the one
    with the strictly smallest distance, so among equidistant candidates the
    lowest index wins. Time is O(n^2), extra space O(n).

    Coordinates are not validated here. With NaN or infinite coordinates no
    candidate may compare smaller than infinity; the first unvisited point is
    then taken, which keeps the tour a permutation and lets the non-finite
    distance show up in the total.
    """

    def __init__(self, points: Sequence[Point]):
        if len(points) == 0:
            raise ValueError("Cannot build a tour over an empty point set.")
        self.points = list(points)
        self.n = len(self.points)

    def _nearest_unvisited(self, current: Point, visited: List[bool]) -> Tuple[int, float]:
        nearest = None
        min_dist = math.inf
        for idx, point in enumerate(self.points):
            if visited[idx]:
                continue
            d = euclidean(current, point)
            if d < min_dist:
                nearest, min_dist = idx, d
        if nearest is None:
            nearest = visited.index(False)
            min_dist = euclidean(current, self.points[nearest])
        return nearest, min_dist

    def _construct(self) -> Tuple[List[int], float, List[float]]:
        visited = [False] * self.n
        order = [0]
        visited[0] = True
        current = self.points[0]
        total = 0.0
        history = []

        for _ in range(self.n - 1):
            nxt, d = self._nearest_unvisited(current, visited)
            order.append(nxt)
            visited[nxt] = True
            current = self.points[nxt]
            total += d
            history.append(total)

        total += euclidean(current, self.points[0])
        order.append(0)
        history.append(total)
        return order, total, history

    def build(self) -> Tuple[List[Point], float]:
        order, total, _ = self._construct()
        return [self.points[i] for i in order], total

    def run(self) -> TourResult:
        start = time.perf_counter()
        order, total, history = self._construct()
        elapsed = time.perf_counter() - start
        return TourResult(tour=[self.points[i] for i in order], order=order, total_distance=total,
                          elapsed_sec=elapsed, history_lengths=history)


def build_tour(points: Sequence[Point]) -> Tuple[List[Point], float]:
    """Return the closed nearest-neighbour tour over ``points`` and its length."""
    return TourBuilder(points).build()
