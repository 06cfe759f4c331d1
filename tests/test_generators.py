# tests/test_generators.py
import math

import numpy as np
import pytest

from pointraster.generators.base import PointGenerator
from pointraster.pipeline import PointPreview
from pointraster.registry import available, build


def test_registered_generators():
    assert available("gen") == ["circle", "rose", "uniform"]
    assert isinstance(build("gen", "rose"), PointGenerator)


def test_rose_shape_and_extent():
    pts = build("gen", "rose", n=3, d=7, count=500, scale=0.8).generate()
    assert pts.shape == (500, 2)
    r = np.hypot(pts[:, 0], pts[:, 1])
    assert r.max() <= 0.8 + 1e-12
    assert r[0] == pytest.approx(0.8)


def test_rose_reduces_ratio_and_period():
    g = build("gen", "rose", n=6, d=14)
    assert (g.n, g.d) == (3, 7)
    assert g.period == pytest.approx(7 * math.pi)
    assert build("gen", "rose", n=2, d=1).period == pytest.approx(2 * math.pi)


def test_circle_points_on_radius():
    pts = build("gen", "circle", center=(0.2, -0.1), radius=0.3, count=64).generate()
    d = np.hypot(pts[:, 0] - 0.2, pts[:, 1] + 0.1)
    assert np.allclose(d, 0.3)
    assert pts[0] == pytest.approx([0.5, -0.1])


def test_uniform_is_seeded_and_bounded():
    a = build("gen", "uniform", count=300, bounds=(0, 4, -2, -1), seed=7).generate()
    b = build("gen", "uniform", count=300, bounds=(0, 4, -2, -1), seed=7).generate()
    c = build("gen", "uniform", count=300, bounds=(0, 4, -2, -1), seed=8).generate()
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)
    assert (a[:, 0] >= 0).all() and (a[:, 0] <= 4).all()
    assert (a[:, 1] >= -2).all() and (a[:, 1] <= -1).all()


@pytest.mark.parametrize("name,kwargs", [
    ("rose", {"n": 0}),
    ("rose", {"count": 0}),
    ("circle", {"radius": 0}),
    ("uniform", {"bounds": (1, 0, 0, 1)}),
])
def test_invalid_parameters(name, kwargs):
    with pytest.raises(ValueError):
        build("gen", name, **kwargs)


def test_generated_rose_renders_inside_raster():
    img, pts = PointPreview(128).render_generated("rose", count=2000)
    assert len(pts) == 2000
    assert (img[..., 0] == 255).sum() > 200
