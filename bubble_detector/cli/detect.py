import os
import sys
import logging
from typing import List, Optional

from dotenv import load_dotenv

from ..exceptions import BubbleDetectorError
from ..models.detection_params import DetectionParams
from ..pipeline.detect_bubbles import detect_bubbles

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Usage: bubble-detect [IMAGE_PATH]

    IMAGE_PATH defaults to $BUBBLE_IMAGE_PATH, then image_bubbles.jpg.
    Output, window and window name come from the BUBBLE_* settings read by
    the pipeline module.
    Returns the process exit status.
    """
    load_dotenv()
    _configure_logging()

    args = sys.argv[1:] if argv is None else argv
    image_path = args[0] if args else None

    try:
        params = DetectionParams.from_env()
    except ValueError as err:
        logger.error(f"Invalid configuration: {err}")
        return 2

    try:
        detect_bubbles(image_path, params=params)
    except BubbleDetectorError as err:
        logger.error(f"{type(err).__name__}: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
