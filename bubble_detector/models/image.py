from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: BGR pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repositories.
    """
    pixels: np.ndarray # Shape (H, W, 3), dtype uint8, BGR order (drawing colours are BGR too).
    path: Path | None = None # Source of the image.
