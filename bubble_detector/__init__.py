"""Bubble detection on a single image with OpenCV (Hough circles + contours)."""

__version__ = "1.0.0"
