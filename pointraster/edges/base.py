# pointraster/edges/base.py
import numpy as np


def truncate(u, v):
    """
    u, v: (N,) float pixel coordinates (column, row)
    Returns: (cols, rows, finite) with cols/rows truncated toward zero but still
    float, and a mask of points where both coordinates are finite.
    """
    finite = np.isfinite(u) & np.isfinite(v)
    cols = np.trunc(np.where(finite, u, 0.0))
    rows = np.trunc(np.where(finite, v, 0.0))
    return cols, rows, finite


def inside(cols, rows, width):
    return (cols >= 0) & (cols < width) & (rows >= 0) & (rows < width)


class EdgePolicy:
    def apply(self, u, v, width):
        """
        u, v: (N,) float pixel coordinates from raster.to_pixels
        width: raster side length
        Returns: (cols, rows) integer index arrays, all inside [0, width)
        """
        raise NotImplementedError
