"""Circular neighbour sampling with bilinear interpolation."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import math
import numpy as np

__all__ = ["SamplePoint", "sample_points", "bilinear", "sample_band"]


@dataclass(frozen=True)
class SamplePoint:
    x: float
    y: float
    rx: int
    ry: int
    on_grid: bool


def sample_points(radius: float, neighbours: int, eps1: float) -> List[SamplePoint]:
    """Offsets of ``neighbours`` points on a circle, clockwise from +row.

    A point counts as on the integer grid when both coordinates are within
    ``eps1`` of their rounded values.
    """
    angle = -2 * math.pi / neighbours
    points = []
    for k in range(neighbours):
        x = radius * math.cos(k * angle)
        y = radius * math.sin(k * angle)
        rx, ry = int(round(x)), int(round(y))
        on_grid = abs(x - rx) < eps1 and abs(y - ry) < eps1
        points.append(SamplePoint(x, y, rx, ry, on_grid))
    return points


def _axis(t: float, eps2: float) -> Tuple[int, int, float]:
    # (low index, high index, weight of the high index)
    r = round(t)
    if abs(t - r) < eps2:
        return int(r), int(r), 0.0
    lo = math.floor(t)
    return int(lo), int(lo) + 1, t - lo


def bilinear(array: np.ndarray, x: float, y: float, i: int, j: int, eps2: float) -> float:
    """Value of ``array`` at ``(i + x, j + y)``.

    An offset within ``eps2`` of an integer is snapped to it, which reduces
    the interpolation to one axis (or to a plain lookup).
    """
    x0, x1, tx = _axis(x, eps2)
    y0, y1, ty = _axis(y, eps2)
    return float(
        (1 - tx) * (1 - ty) * array[i + x0, j + y0]
        + tx * (1 - ty) * array[i + x1, j + y0]
        + (1 - tx) * ty * array[i + x0, j + y1]
        + tx * ty * array[i + x1, j + y1]
    )


def _shifted(source: np.ndarray, dx: int, dy: int, rows: Tuple[int, int], margin: int, n_cols: int) -> np.ndarray:
    start, stop = rows
    return source[margin + start + dx:margin + stop + dx, margin + dy:margin + n_cols + dy]


def sample_band(source: np.ndarray, point: SamplePoint, rows: Tuple[int, int], margin: int,
                n_cols: int, eps2: float) -> np.ndarray:
    """Sample ``point`` for every pixel of an output row band.

    Output pixel ``(r, c)`` sits at ``(r + margin, c + margin)`` in ``source``.
    Same arithmetic as :func:`bilinear`, applied to whole shifted views.
    """
    if point.on_grid:
        return _shifted(source, point.rx, point.ry, rows, margin, n_cols).copy()
    x0, x1, tx = _axis(point.x, eps2)
    y0, y1, ty = _axis(point.y, eps2)
    return (
        (1 - tx) * (1 - ty) * _shifted(source, x0, y0, rows, margin, n_cols)
        + tx * (1 - ty) * _shifted(source, x1, y0, rows, margin, n_cols)
        + (1 - tx) * ty * _shifted(source, x0, y1, rows, margin, n_cols)
        + tx * ty * _shifted(source, x1, y1, rows, margin, n_cols)
    )
