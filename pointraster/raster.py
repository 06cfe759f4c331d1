# pointraster/raster.py
"""
Point rasterizer: maps 2D points from a continuous bounds rectangle onto a
square RGBA raster, one white pixel per point on a black background.

Image layout follows the OpenCV/numpy convention: img[row, col] with row 0
at the top, so the y axis is flipped relative to the input coordinates.
"""
from typing import NamedTuple

import numpy as np

from .bounds import DEFAULT_BOUNDS, check_bounds
from .edges.base import EdgePolicy
from .edges import clamp, drop, strict  # noqa: F401  (registers edge policies)
from .registry import build

BACKGROUND = (0, 0, 0, 255)
FOREGROUND = (255, 255, 255, 255)


class Point2D(NamedTuple):
    x: float
    y: float


def check_width(width):
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
        raise ValueError(f"width must be a positive integer, got {width!r}")
    if width <= 0:
        raise ValueError(f"width must be a positive integer, got {width}")
    return int(width)


def as_points(points):
    """Any sequence of (x, y) pairs or an (N,2) array -> float64 (N,2)."""
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2), got {pts.shape}")
    return pts


def new_image(width):
    img = np.empty((width, width, 4), dtype=np.uint8)
    img[:] = BACKGROUND
    return img


def to_pixels(points, width, bounds=DEFAULT_BOUNDS):
    """
    points: (N,2) x,y in bounds coordinates
    Returns: (u, v) float column/row coordinates before truncation.
    xmin -> column 0, xmax -> column width-1; ymax -> row 0, ymin -> row width-1.
    """
    pts = as_points(points)
    xmin, xmax, ymin, ymax = check_bounds(bounds)
    span = float(check_width(width) - 1)
    fx = (pts[:, 0] - xmin) / (xmax - xmin)
    fy = (pts[:, 1] - ymin) / (ymax - ymin)
    u = fx * span
    v = span - fy * span
    return u, v


def get_edge_policy(edge):
    if isinstance(edge, EdgePolicy):
        return edge
    return build("edge", edge)


def rasterize_points(width, points, bounds=DEFAULT_BOUNDS, edge="drop"):
    """
    width: side of the square raster in pixels
    points: (N,2) or sequence of (x, y)
    bounds: (xmin, xmax, ymin, ymax) mapped onto the raster
    edge: edge policy name ("drop", "clamp", "strict") or an EdgePolicy
    Returns: uint8 (width, width, 4) RGBA image
    """
    width = check_width(width)
    bounds = check_bounds(bounds)
    policy = get_edge_policy(edge)

    img = new_image(width)
    u, v = to_pixels(points, width, bounds)
    cols, rows = policy.apply(u, v, width)
    # repeated (row, col) pairs collapse into one mark; every write is FOREGROUND
    img[rows, cols] = FOREGROUND
    return img


def rasterize_points_default(width, points, edge="drop"):
    return rasterize_points(width, points, DEFAULT_BOUNDS, edge=edge)
