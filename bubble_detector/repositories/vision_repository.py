# repositories/vision_repository.py
from contextlib import contextmanager
from typing import List, Sequence, Tuple

import cv2
import numpy as np

from ..exceptions import VisionOperationError


@contextmanager
def _cv_operation(name: str):
    try:
        yield
    except cv2.error as err:
        raise VisionOperationError(f"{name} failed: {err}") from err


class VisionRepository:
    """
    Raw OpenCV calls, one per transform.

    • Works on numpy rasters only, no Image entities.
    • Every cv2.error is re-raised as VisionOperationError.
    """

    # ---------- preprocessing ----------
    @staticmethod
    def to_grayscale(bgr: np.ndarray) -> np.ndarray:
        with _cv_operation("Grayscale conversion"):
            return cv2.cvtColor(bgr, cv2.COLOR_BGR2GRAY)

    @staticmethod
    def gaussian_blur(gray: np.ndarray, ksize: Tuple[int, int], sigma: float) -> np.ndarray:
        with _cv_operation("Gaussian blur"):
            return cv2.GaussianBlur(gray, ksize, sigmaX=sigma, sigmaY=0, borderType=cv2.BORDER_CONSTANT)

    # ---------- detection ----------
    @staticmethod
    def hough_circles(
        gray: np.ndarray,
        dp: float,
        min_dist: float,
        canny_thr: float,
        votes_thr: float,
        min_radius: int,
        max_radius: int,
    ) -> np.ndarray:
        """
        Returns float32 array (N, 3) of (x, y, r); empty when nothing is found.
        """
        with _cv_operation("Hough circle transform"):
            circles = cv2.HoughCircles(
                gray,
                cv2.HOUGH_GRADIENT,
                dp,
                min_dist,
                param1=canny_thr,
                param2=votes_thr,
                minRadius=min_radius,
                maxRadius=max_radius,
            )
        if circles is None:
            return np.empty((0, 3), dtype=np.float32)
        return circles.reshape(-1, 3)

    @staticmethod
    def binary_threshold(gray: np.ndarray, thresh: float, max_value: float) -> np.ndarray:
        with _cv_operation("Binary threshold"):
            _, binary = cv2.threshold(gray, thresh, max_value, cv2.THRESH_BINARY)
        return binary

    @staticmethod
    def find_contours(binary: np.ndarray) -> List[np.ndarray]:
        """All contours, no hierarchy (RETR_LIST), straight runs reduced to endpoints."""
        with _cv_operation("Contour extraction"):
            contours, _ = cv2.findContours(binary, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)
        return list(contours)

    # ---------- drawing (in place) ----------
    @staticmethod
    def draw_filled_circle(
        bgr: np.ndarray, center: Tuple[int, int], radius: int, color: Tuple[int, int, int]
    ) -> None:
        with _cv_operation("Circle drawing"):
            cv2.circle(bgr, center, radius, color, thickness=cv2.FILLED, lineType=cv2.LINE_AA)

    @staticmethod
    def draw_filled_contours(
        bgr: np.ndarray, contours: Sequence[np.ndarray], color: Tuple[int, int, int]
    ) -> None:
        if not contours:
            return
        with _cv_operation("Contour drawing"):
            cv2.drawContours(bgr, list(contours), -1, color, thickness=cv2.FILLED, lineType=cv2.LINE_8)

    # ---------- display ----------
    @staticmethod
    def show(bgr: np.ndarray, window_name: str) -> None:
        with _cv_operation("Image display"):
            cv2.imshow(window_name, bgr)
            cv2.waitKey(0)
            cv2.destroyWindow(window_name)
