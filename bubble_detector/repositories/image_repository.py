from pathlib import Path
from typing import Union
import logging

import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image
from ..exceptions import ImageLoadError

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O for Image entities.
    """

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise ImageLoadError(f"Image not found: {path}")

        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if arr_bgr is None:
            raise ImageLoadError(f"Image unreadable or not a decodable raster: {path}")

        logger.debug(f"Decoded {path}: {arr_bgr.shape}")
        return Image(pixels=arr_bgr, path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path] = None) -> Path:
        """Write the pixels to *path* (or image.path). Pillow expects RGB, so channels are swapped."""
        out = Path(path) if path is not None else image.path
        if out is None:
            raise ValueError("No output path given and image has no path")
        out.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(np.ascontiguousarray(image.pixels[:, :, ::-1])).save(out)
        return out
