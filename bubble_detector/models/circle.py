from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Circle:
    center: Tuple[int, int]     # (x, y) in pixels
    radius: int                 # pixels

    @classmethod
    def from_hough(cls, raw) -> "Circle":
        """Build from one (x, y, r) float triple as returned by cv2.HoughCircles."""
        x, y, r = raw[:3]
        return cls(center=(int(x), int(y)), radius=int(r))
