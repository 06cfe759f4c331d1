# pointraster/edges/strict.py
import numpy as np
from .base import EdgePolicy, truncate, inside
from ..registry import register

@register("edge", "strict")
class Strict(EdgePolicy):
    def apply(self, u, v, width):
        cols, rows, finite = truncate(u, v)
        ok = finite & inside(cols, rows, width)
        if not ok.all():
            bad = np.flatnonzero(~ok)
            k = int(bad[0])
            raise ValueError(
                f"{bad.size} point(s) map outside the {width}x{width} raster "
                f"(first at index {k}: col={u[k]:.3f}, row={v[k]:.3f})"
            )
        return cols.astype(np.intp), rows.astype(np.intp)
