# pointraster/generators/uniform.py
import numpy as np
from .base import PointGenerator, check_count
from ..bounds import DEFAULT_BOUNDS, check_bounds
from ..registry import register

@register("gen", "uniform")
class Uniform(PointGenerator):
    def __init__(self, count=1000, bounds=DEFAULT_BOUNDS, seed=42):
        self.count = check_count(count)
        self.bounds = check_bounds(bounds)
        self.seed = seed

    def generate(self):
        rng = np.random.default_rng(self.seed)
        xmin, xmax, ymin, ymax = self.bounds
        x = rng.uniform(xmin, xmax, self.count)
        y = rng.uniform(ymin, ymax, self.count)
        return np.stack([x, y], 1)
