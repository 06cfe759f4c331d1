# pointraster/edges/drop.py
import numpy as np
from .base import EdgePolicy, truncate, inside
from ..registry import register

@register("edge", "drop")
class Drop(EdgePolicy):
    def apply(self, u, v, width):
        cols, rows, finite = truncate(u, v)
        m = finite & inside(cols, rows, width)
        return cols[m].astype(np.intp), rows[m].astype(np.intp)
