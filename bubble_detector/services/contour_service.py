from typing import List
import logging

import numpy as np

from ..models.detection_params import DetectionParams
from ..models.image import Image
from ..repositories.vision_repository import VisionRepository

logger = logging.getLogger(__name__)


class ContourService:
    """
    Threshold → contour list → filled drawing.
    """

    def __init__(self, params: DetectionParams = None):
        self.params = params or DetectionParams()
        self.repo = VisionRepository()

    def threshold(self, blurred: np.ndarray) -> np.ndarray:
        return self.repo.binary_threshold(blurred, self.params.binary_threshold, self.params.binary_max_value)

    def extract(self, blurred: np.ndarray) -> List[np.ndarray]:
        """
        Args:
            blurred (np.ndarray): single-channel uint8 raster.

        Returns:
            List[np.ndarray]: every contour at any nesting level, each (N, 1, 2) int32.
        """
        binary = self.threshold(blurred)
        contours = self.repo.find_contours(binary)
        logger.debug(f"Extracted {len(contours)} contours")
        return contours

    def draw(self, img: Image, contours: List[np.ndarray]) -> None:
        self.repo.draw_filled_contours(img.pixels, contours, self.params.bubble_color)
