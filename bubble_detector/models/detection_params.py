from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Orange, BGR order
BUBBLE_COLOR: Tuple[int, int, int] = (0, 165, 255)


def _parse_color(raw: str) -> Tuple[int, int, int]:
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if len(parts) != 3:
        raise ValueError(f"BUBBLE_COLOR must be 'b,g,r', got {raw!r}")
    return tuple(int(p) for p in parts)


@dataclass(frozen=True)
class DetectionParams:
    """
    Value-object holding every tuning constant of the detector.

    The defaults are the detector's reference values and determine its
    sensitivity; change them through the environment (see from_env) rather
    than in code.
    """
    # ── Preprocessing ────────────────────────────────────────────────
    blur_kernel_size: int = 3           # square Gaussian kernel, odd
    blur_sigma: float = 1.0             # sigmaX (sigmaY follows it)

    # ── Hough circles (HOUGH_GRADIENT) ───────────────────────────────
    hough_dp: float = 1.0               # inverse accumulator resolution
    hough_min_dist: float = 10.0        # min distance between centres
    hough_canny_thr: float = 100.0      # upper Canny threshold
    hough_votes_thr: float = 30.0       # accumulator threshold
    min_radius: int = 1
    max_radius: int = 25

    # ── Binary threshold ─────────────────────────────────────────────
    binary_threshold: float = 20.0
    binary_max_value: float = 255.0

    # ── Drawing ──────────────────────────────────────────────────────
    bubble_color: Tuple[int, int, int] = BUBBLE_COLOR

    def __post_init__(self):
        if self.hough_dp <= 0 or self.hough_min_dist <= 0:
            raise ValueError(f"hough_dp and hough_min_dist must be positive, got {self.hough_dp}, {self.hough_min_dist}")
        if self.min_radius < 0 or self.max_radius < 0:
            raise ValueError(f"radii must be non-negative, got {self.min_radius}, {self.max_radius}")
        if self.blur_kernel_size <= 0 or self.blur_kernel_size % 2 == 0:
            raise ValueError(f"blur_kernel_size must be a positive odd integer, got {self.blur_kernel_size}")
        if self.min_radius > self.max_radius:
            raise ValueError(f"min_radius ({self.min_radius}) exceeds max_radius ({self.max_radius})")
        if len(self.bubble_color) != 3 or not all(0 <= c <= 255 for c in self.bubble_color):
            raise ValueError(f"bubble_color must be three values in [0, 255], got {self.bubble_color}")

    @property
    def blur_kernel(self) -> Tuple[int, int]:
        return self.blur_kernel_size, self.blur_kernel_size

    @classmethod
    def from_env(cls) -> "DetectionParams":
        """Create params from environment variables, falling back to the defaults."""
        defaults = cls()
        color = os.getenv("BUBBLE_COLOR")
        return cls(
            blur_kernel_size=int(os.getenv("BLUR_KERNEL_SIZE", defaults.blur_kernel_size)),
            blur_sigma=float(os.getenv("BLUR_SIGMA", defaults.blur_sigma)),
            hough_dp=float(os.getenv("HOUGH_DP", defaults.hough_dp)),
            hough_min_dist=float(os.getenv("HOUGH_MIN_DIST", defaults.hough_min_dist)),
            hough_canny_thr=float(os.getenv("HOUGH_CANNY_THRESHOLD", defaults.hough_canny_thr)),
            hough_votes_thr=float(os.getenv("HOUGH_VOTES_THRESHOLD", defaults.hough_votes_thr)),
            min_radius=int(os.getenv("HOUGH_MIN_RADIUS", defaults.min_radius)),
            max_radius=int(os.getenv("HOUGH_MAX_RADIUS", defaults.max_radius)),
            binary_threshold=float(os.getenv("BINARY_THRESHOLD", defaults.binary_threshold)),
            binary_max_value=float(os.getenv("BINARY_MAX_VALUE", defaults.binary_max_value)),
            bubble_color=_parse_color(color) if color else defaults.bubble_color,
        )
