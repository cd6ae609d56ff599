from .tsp import Point, TSPInstance, euclidean
from .nearest_neighbor import TourBuilder, TourResult, build_tour
from .points import PointErrorKind, PointParseError, parse_point, read_points, write_points
from .report import format_report, print_report
from .experiments import ExperimentConfig, run_repeated_trials, run_size_sweep
