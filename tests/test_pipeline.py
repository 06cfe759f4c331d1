# tests/test_pipeline.py
import numpy as np
import pytest

from pointraster.bounds import parse_bounds
from pointraster.pipeline import PointPreview
from pointraster.raster import rasterize_points


def test_shapes():
    W = 64
    pipe = PointPreview(W, bounds=(-10, 10, -10, 10), edge="clamp")
    # fake points in a ring
    N = 1000
    ang = np.random.rand(N) * 2 * np.pi
    pts = np.stack([np.cos(ang) * 10, np.sin(ang) * 10], 1)
    out = pipe.render(pts)
    assert out.shape == (W, W, 4)
    assert np.array_equal(out, rasterize_points(W, pts, (-10, 10, -10, 10), edge="clamp"))


def test_render_file(tmp_path):
    (tmp_path / "p.csv").write_text("0,0\n1,1\n")
    img, pts = PointPreview(5).render_file(tmp_path / "p.csv")
    assert pts.shape == (2, 2)
    assert (img[..., 0] == 255).sum() == 2


def test_each_render_is_fresh():
    pipe = PointPreview(8)
    a = pipe.render([(0, 0)])
    b = pipe.render([])
    assert (a[..., 0] == 255).sum() == 1
    assert (b[..., 0] == 255).sum() == 0


def test_invalid_construction():
    with pytest.raises(ValueError):
        PointPreview(0)
    with pytest.raises(ValueError):
        PointPreview(8, bounds=(0, 0, 0, 1))
    with pytest.raises(KeyError):
        PointPreview(8, edge="nope")


def test_parse_bounds():
    assert tuple(parse_bounds("0, 2,-1,1")) == (0.0, 2.0, -1.0, 1.0)
    with pytest.raises(ValueError):
        parse_bounds("0,1,2")
