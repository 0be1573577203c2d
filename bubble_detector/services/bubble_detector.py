from pathlib import Path
from typing import List, Union
import logging
import time

import numpy as np

from ..models.circle import Circle
from ..models.detection_params import DetectionParams
from ..models.image import Image
from ..models.processing_report import ProcessingReport
from .circle_service import CircleService
from .contour_service import ContourService
from .image_service import ImageService

logger = logging.getLogger(__name__)


class BubbleDetector:
    """
    Owns one colour image and its grayscale / blurred derivatives.

    *   The constructor loads and preprocesses; it either fully succeeds or raises.
    *   detect_circles() and process_image() both draw onto self.image.pixels,
        circles first, then contours. Nothing is deduplicated between them.
    *   gray and blurred are computed once and never re-derived.
    """

    def __init__(
        self,
        image_path: Union[str, Path],
        params: DetectionParams = None,
        image_service: ImageService = None,
    ):
        self.params = params or DetectionParams()
        self.image_service = image_service or ImageService()
        self.circle_service = CircleService(self.params)
        self.contour_service = ContourService(self.params)

        self.image: Image = self.image_service.load(image_path)
        self.gray: np.ndarray = self.image_service.to_grayscale(self.image)
        self.blurred: np.ndarray = self.image_service.blur(self.gray, self.params)

    def detect_circles(self) -> List[Circle]:
        """
        Run the Hough transform on the blurred image and draw a filled disc per
        detection. Returns the circles drawn (possibly none).
        """
        circles = self.circle_service.detect(self.blurred)
        logger.info(f"Detected {len(circles)} circles")
        self.circle_service.draw(self.image, circles)
        return circles

    def process_image(self) -> ProcessingReport:
        """
        Threshold, extract and draw all contours, timing the three steps.
        Prints the bubble count and the processing time.
        """
        start = time.perf_counter()

        contours = self.contour_service.extract(self.blurred)
        self.contour_service.draw(self.image, contours)

        report = ProcessingReport(contour_count=len(contours), duration=time.perf_counter() - start)
        logger.info(f"Contour pass finished: {report.contour_count} contours in {report.duration_ms:.2f} ms")
        for line in report.lines():
            print(line)
        return report
