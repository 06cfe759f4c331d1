# pointraster/bounds.py
import math
from typing import NamedTuple


class Bounds(NamedTuple):
    """Continuous rectangle mapped onto the raster: (xmin, xmax, ymin, ymax)."""
    xmin: float
    xmax: float
    ymin: float
    ymax: float


DEFAULT_BOUNDS = Bounds(-1.0, 1.0, -1.0, 1.0)


def check_bounds(bounds):
    """
    bounds: any 4-sequence (xmin, xmax, ymin, ymax)
    Returns: Bounds with float fields
    Raises ValueError for non-finite values, or for a span on either axis that
    is empty or overflows to inf.
    """
    vals = tuple(bounds)
    if len(vals) != 4:
        raise ValueError(f"bounds needs 4 values (xmin, xmax, ymin, ymax), got {len(vals)}")
    b = Bounds(*(float(v) for v in vals))
    if not all(math.isfinite(v) for v in b):
        raise ValueError(f"bounds must be finite, got {b}")
    if b.xmax <= b.xmin:
        raise ValueError(f"xmax must be greater than xmin, got xmin={b.xmin} xmax={b.xmax}")
    if b.ymax <= b.ymin:
        raise ValueError(f"ymax must be greater than ymin, got ymin={b.ymin} ymax={b.ymax}")
    if not (math.isfinite(b.xmax - b.xmin) and math.isfinite(b.ymax - b.ymin)):
        # spans divide every coordinate and must stay finite
        raise ValueError(f"bounds span overflows a float, got {b}")
    return b


def parse_bounds(text):
    # "xmin,xmax,ymin,ymax" as written in a YAML config
    parts = [p for p in str(text).replace(" ", "").split(",") if p]
    return check_bounds([float(p) for p in parts])
