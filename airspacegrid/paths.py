"""Reading flight paths from text and splitting them into line segments."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

Vector = tuple[float, float, float]

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _atof(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _NUMBER_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def parse_path_text(text: str) -> list[Vector]:
    """Read one ``x y z`` point per line.

    Lines with fewer than three space-separated values, and points equal
    to the origin, are skipped.
    """
    points = []
    for line in text.splitlines():
        if not line:
            continue
        tokens = [token for token in line.split(" ") if token]
        if len(tokens) < 3:
            continue
        point = (_atof(tokens[0]), _atof(tokens[1]), _atof(tokens[2]))
        if point != (0.0, 0.0, 0.0):
            points.append(point)
    return points


def load_path_file(path: str | PathLike) -> list[Vector]:
    """Read a path file; raise FileNotFoundError when it does not exist."""
    file = Path(path)
    if not file.is_file():
        raise FileNotFoundError(f"path file not found: {file}")
    return parse_path_text(file.read_text(encoding="utf-8"))


def path_segments(points: list[Vector]) -> list[tuple[Vector, Vector]]:
    """Pair each point with the next one."""
    return list(zip(points, points[1:]))