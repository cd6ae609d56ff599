from __future__ import annotations
import sys
from typing import List, Optional, TextIO

from .tsp import Point


def format_report(tour: List[Point], total_distance: float, elapsed_sec: float) -> str:
    return "\n".join([
        f"Path: {tour!r}",
        f"Total Distance: {total_distance}",
        f"Elapsed Time: {elapsed_sec:.6f} seconds",
    ])


def print_report(tour: List[Point], total_distance: float, elapsed_sec: float, file: Optional[TextIO] = None):
    print(format_report(tour, total_distance, elapsed_sec), file=file or sys.stdout)
