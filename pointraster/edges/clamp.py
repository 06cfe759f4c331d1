# pointraster/edges/clamp.py
import numpy as np
from .base import EdgePolicy
from ..registry import register

@register("edge", "clamp")
class Clamp(EdgePolicy):
    def apply(self, u, v, width):
        # NaN has no nearest edge; +-inf clamps like any other far point
        keep = ~(np.isnan(u) | np.isnan(v))
        cols = np.clip(np.trunc(u[keep]), 0, width - 1)
        rows = np.clip(np.trunc(v[keep]), 0, width - 1)
        return cols.astype(np.intp), rows.astype(np.intp)
