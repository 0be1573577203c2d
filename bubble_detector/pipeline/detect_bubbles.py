# pipeline/detect_bubbles.py
from pathlib import Path
from typing import Optional, Union
import logging
import os

from dotenv import load_dotenv

from ..models.detection_params import DetectionParams
from ..models.processing_report import ProcessingReport
from ..services.bubble_detector import BubbleDetector
from ..services.image_service import ImageService

# env‑vars
load_dotenv()
IMAGE_PATH = os.getenv("BUBBLE_IMAGE_PATH", "image_bubbles.jpg")
OUTPUT_PATH = os.getenv("BUBBLE_OUTPUT_PATH")
SHOW_WINDOW = os.getenv("BUBBLE_SHOW_WINDOW", "1") != "0"
WINDOW_NAME = os.getenv("BUBBLE_WINDOW_NAME", "Processed Image")

logger = logging.getLogger(__name__)


def detect_bubbles(
    image_path: Union[str, Path, None] = None,
    *,
    params: DetectionParams = None,
    image_service: ImageService = None,
    output_path: Union[str, Path, None] = None,
    show: Optional[bool] = None,
    window_name: Optional[str] = None,
) -> ProcessingReport:
    """
    Full run over one image:
        • load, grayscale and blur
        • Hough circles, drawn as filled discs
        • threshold + contours, drawn filled, count and time printed
        • optionally save the annotated image, then display it
    Arguments left as None fall back to the BUBBLE_* settings above.
    Any failure propagates; there is no partial result.
    """
    image_path = image_path or IMAGE_PATH
    output_path = output_path or OUTPUT_PATH
    show = SHOW_WINDOW if show is None else show
    window_name = window_name or WINDOW_NAME

    image_service = image_service or ImageService()
    detector = BubbleDetector(image_path, params=params, image_service=image_service)

    detector.detect_circles()
    report = detector.process_image()

    if output_path:
        image_service.save(detector.image, output_path)
    if show:
        image_service.show(detector.image, window_name)

    return report
