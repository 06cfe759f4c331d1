# pointraster/generators/circle.py
import numpy as np
from .base import PointGenerator, check_count
from ..registry import register

@register("gen", "circle")
class Circle(PointGenerator):
    def __init__(self, center=(0.0, 0.0), radius=0.5, count=1000):
        self.cx, self.cy = (float(c) for c in center)
        self.radius = float(radius)
        if not self.radius > 0:
            raise ValueError(f"radius must be > 0, got {radius}")
        self.count = check_count(count)

    def generate(self):
        t = np.arange(self.count, dtype=np.float64) / self.count  # t in [0,1)
        a = 2 * np.pi * t
        return np.stack([self.cx + self.radius * np.cos(a),
                         self.cy + self.radius * np.sin(a)], 1)
