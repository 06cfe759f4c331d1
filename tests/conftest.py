# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Resolve repo root no matter where pytest is run from
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from pointraster.raster import FOREGROUND  # noqa: E402


@pytest.fixture
def lit():
    """Return the (x, y) pixel positions painted with the foreground color."""
    def _lit(img):
        rows, cols = (img == FOREGROUND).all(-1).nonzero()
        return sorted(zip(cols.tolist(), rows.tolist()))
    return _lit
