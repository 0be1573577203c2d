class BubbleDetectorError(Exception):
    """Base class for every failure the detector reports."""


class ImageLoadError(BubbleDetectorError, OSError):
    """The input file is missing, unreadable or not a decodable raster."""


class VisionOperationError(BubbleDetectorError, RuntimeError):
    """An OpenCV transform or drawing call failed on the current image state."""
