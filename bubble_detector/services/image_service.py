from pathlib import Path
from typing import Union
import logging

import numpy as np

from ..models.image import Image
from ..models.detection_params import DetectionParams
from ..repositories.image_repository import ImageRepository
from ..repositories.vision_repository import VisionRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O and preprocessing helpers. No detection logic."""
    def __init__(self):
        self.image_repository = ImageRepository()
        self.vision_repository = VisionRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single colour image from disk into an Image object."""
        img = self.image_repository.load(path)
        logger.info(f"Image loaded: {img.path} {img.pixels.shape}")
        return img

    def save(self, image: Image, path: Union[str, Path] = None) -> Path:
        out = self.image_repository.save(image, path)
        logger.info(f"Annotated image saved to {out}")
        return out

    def to_grayscale(self, img: Image) -> np.ndarray:
        return self.vision_repository.to_grayscale(img.pixels)

    def blur(self, gray: np.ndarray, params: DetectionParams) -> np.ndarray:
        return self.vision_repository.gaussian_blur(gray, params.blur_kernel, params.blur_sigma)

    def show(self, img: Image, window_name: str) -> None:
        """Open a window with the image and block until a key is pressed."""
        self.vision_repository.show(img.pixels, window_name)
