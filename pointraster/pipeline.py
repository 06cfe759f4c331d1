# pointraster/pipeline.py
from .bounds import DEFAULT_BOUNDS, check_bounds
from .generators import circle, rose, uniform  # noqa: F401  (registers generators)
from .io_points import read_points
from .raster import check_width, get_edge_policy, rasterize_points
from .registry import build

class PointPreview:
    def __init__(self, width, bounds=DEFAULT_BOUNDS, edge="drop"):
        self.width = check_width(width)
        self.bounds = check_bounds(bounds)
        self.edge = get_edge_policy(edge)

    def render(self, points):
        return rasterize_points(self.width, points, self.bounds, edge=self.edge)

    def render_file(self, points_path):
        pts = read_points(points_path)
        return self.render(pts), pts

    def render_generated(self, gen, **params):
        # gen: registered generator name or a PointGenerator instance
        if isinstance(gen, str):
            gen = build("gen", gen, **params)
        pts = gen.generate()
        return self.render(pts), pts
