# pointraster/io_image.py
from pathlib import Path
import cv2
import numpy as np
from .raster import BACKGROUND

def write_png(path: Path, img):
    """Write an RGBA uint8 (H,W,4) image; OpenCV wants BGRA on disk."""
    img = np.asarray(img)
    if img.ndim != 3 or img.shape[2] != 4 or img.dtype != np.uint8:
        raise ValueError(f"expected uint8 (H,W,4) RGBA image, got {img.dtype} {img.shape}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(path), cv2.cvtColor(img, cv2.COLOR_RGBA2BGRA)):
        raise IOError(f"cv2.imwrite failed for {path}")
    return path

def read_png(path: Path):
    """Read any PNG back as RGBA; gray and BGR inputs come back opaque."""
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise FileNotFoundError(f"Image not found or unreadable: {path}")
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)

def sanity_check(img, background=BACKGROUND):
    """
    img: (H,W,4) RGBA
    Returns: dict with size, foreground pixel count, coverage (%) and flags
    for images where nothing was drawn or every pixel is the same.
    """
    img = np.asarray(img)
    h, w = img.shape[:2]
    bg = np.asarray(background[:3], dtype=img.dtype)
    fg = np.any(img[..., :3] != bg, axis=-1)
    n = int(fg.sum())
    return {
        "height": int(h),
        "width": int(w),
        "foreground": n,
        "coverage": 100.0 * n / (h * w) if h * w else 0.0,
        "all_background": n == 0,
        "uniform": bool((img == img[0, 0]).all()) if h * w else True,
        "opaque": bool((img[..., 3] == 255).all()),
    }
