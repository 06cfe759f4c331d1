# pointraster/generators/rose.py
import math
import numpy as np
from .base import PointGenerator, check_count
from ..registry import register

@register("gen", "rose")
class Rose(PointGenerator):
    """Rose curve r = cos(n/d * theta), sampled over one closed period."""

    def __init__(self, n=3, d=7, count=4000, scale=1.0):
        n, d = int(n), int(d)
        if n < 1 or d < 1:
            raise ValueError(f"rose needs n >= 1 and d >= 1, got n={n} d={d}")
        g = math.gcd(n, d)
        self.n, self.d = n // g, d // g
        self.count = check_count(count)
        self.scale = float(scale)

    @property
    def period(self):
        # odd n*d closes after pi*d, otherwise after 2*pi*d
        if (self.n * self.d) % 2 == 1:
            return math.pi * self.d
        return 2 * math.pi * self.d

    def generate(self):
        theta = np.linspace(0.0, self.period, self.count, endpoint=False)
        r = np.cos(self.n / self.d * theta) * self.scale
        return np.stack([r * np.cos(theta), r * np.sin(theta)], 1)
