from typing import List
import logging

import numpy as np

from ..models.circle import Circle
from ..models.detection_params import DetectionParams
from ..models.image import Image
from ..repositories.vision_repository import VisionRepository

logger = logging.getLogger(__name__)


class CircleService:
    """
    Hough-circle detection on a blurred grayscale raster and disc drawing.
    """

    def __init__(self, params: DetectionParams = None):
        self.params = params or DetectionParams()
        self.repo = VisionRepository()

    def detect(self, blurred: np.ndarray) -> List[Circle]:
        p = self.params
        raw = self.repo.hough_circles(
            blurred,
            dp=p.hough_dp,
            min_dist=p.hough_min_dist,
            canny_thr=p.hough_canny_thr,
            votes_thr=p.hough_votes_thr,
            min_radius=p.min_radius,
            max_radius=p.max_radius,
        )
        return [Circle.from_hough(c) for c in raw]

    def draw(self, img: Image, circles: List[Circle]) -> None:
        """Filled, antialiased discs drawn straight onto img.pixels."""
        for circle in circles:
            logger.debug(f"Circle at {circle.center} r={circle.radius}")
            self.repo.draw_filled_circle(img.pixels, circle.center, circle.radius, self.params.bubble_color)
