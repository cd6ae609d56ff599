from __future__ import annotations
import math
import os
from enum import Enum
from typing import Iterable, List, Optional, Sequence, TextIO, Union

from .tsp import Point

PointSource = Union[str, "os.PathLike[str]", TextIO, Iterable[str]]


class PointErrorKind(Enum):
    FORMAT = "Invalid format"
    PARSE = "Error parsing coordinate"
    IO = "I/O Error"


class PointParseError(ValueError):
    """A point source could not be turned into a list of points.

    ``kind`` tells which of the three failure cases occurred; the message is
    rendered from it, e.g. ``Invalid format: 1 2 3``.
    """

    def __init__(self, kind: PointErrorKind, detail: str, line_number: Optional[int] = None):
        self.kind = kind
        self.detail = detail
        self.line_number = line_number
        super().__init__(kind, detail, line_number)

    def __str__(self):
        msg = f"{self.kind.value}: {self.detail}"
        if self.line_number is not None:
            msg += f" (line {self.line_number})"
        return msg


def parse_point(line: str, allow_non_finite: bool = False) -> Point:
    """Parse one ``x y`` line. Tokens are converted before they are counted."""
    coords = []
    for token in line.split():
        if "_" in token:
            raise PointParseError(PointErrorKind.PARSE, f"invalid float literal {token!r}")
        try:
            value = float(token)
        except ValueError as err:
            raise PointParseError(PointErrorKind.PARSE, str(err)) from err
        if not allow_non_finite and not math.isfinite(value):
            raise PointParseError(PointErrorKind.PARSE, f"non-finite coordinate {token!r}")
        coords.append(value)
    if len(coords) != 2:
        raise PointParseError(PointErrorKind.FORMAT, line.rstrip("\r\n"))
    return coords[0], coords[1]


def _parse_lines(lines: Iterable[str], allow_non_finite: bool) -> List[Point]:
    points = []
    for lineno, line in enumerate(lines, start=1):
        try:
            points.append(parse_point(line, allow_non_finite=allow_non_finite))
        except PointParseError as err:
            raise PointParseError(err.kind, err.detail, lineno) from err.__cause__
    return points


def read_points(source: PointSource, *, allow_non_finite: bool = False) -> List[Point]:
    """Read points, one ``x y`` pair per line.

    ``source`` may be a path, an open text stream or any iterable of lines.
    The first bad line aborts the read; nothing is skipped.
    """
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, "r", encoding="utf-8") as f:
                return _parse_lines(f, allow_non_finite)
        except (OSError, UnicodeDecodeError) as err:
            raise PointParseError(PointErrorKind.IO, str(err)) from err
    try:
        return _parse_lines(source, allow_non_finite)
    except (OSError, UnicodeDecodeError) as err:
        raise PointParseError(PointErrorKind.IO, str(err)) from err


def write_points(path: Union[str, "os.PathLike[str]"], coords: Sequence[Point]) -> str:
    d = os.path.dirname(os.fspath(path))
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for x, y in coords:
            f.write(f"{x!r} {y!r}\n")
    return os.fspath(path)
