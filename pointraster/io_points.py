# pointraster/io_points.py
from pathlib import Path
import numpy as np
from .raster import as_points

TEXT_EXTS = (".txt", ".csv", ".xy")

def read_points(path: Path):
    """
    .npy -> numpy array, .bin -> raw float32 x,y pairs, .txt/.csv/.xy -> text
    columns (comma or whitespace separated, '#' comments).
    Returns: float64 (N,2)
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Points not found: {path}")
    ext = path.suffix.lower()
    if ext == ".npy":
        pts = np.load(path)
    elif ext == ".bin":
        raw = np.fromfile(path, dtype=np.float32)
        if raw.size % 2:
            raise ValueError(f"{path}: odd number of float32 values ({raw.size}), expected x,y pairs")
        pts = raw.reshape(-1, 2)
    elif ext in TEXT_EXTS:
        lines = [ln.split("#", 1)[0].strip() for ln in path.read_text().splitlines()]
        lines = [ln for ln in lines if ln]
        if not lines:
            return np.empty((0, 2), dtype=np.float64)
        delim = "," if "," in lines[0] else None
        pts = np.loadtxt(lines, delimiter=delim, ndmin=2)
    else:
        raise ValueError(f"Unsupported points file '{path.name}' (use .npy, .bin, {', '.join(TEXT_EXTS)})")
    try:
        return as_points(pts)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e
