from __future__ import annotations
from dataclasses import dataclass


def format_duration(seconds: float) -> str:
    """
    Render a duration with two decimals and the largest unit that keeps the
    value >= 1, e.g. 0.00137 -> "1.37ms".
    """
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


@dataclass
class ProcessingReport:
    """
    Outcome of the threshold + contour pass.
    """
    contour_count: int  # Number of contours extracted (reported as the bubble count)
    duration: float     # Wall-clock seconds for threshold, extraction and drawing

    @property
    def duration_ms(self) -> float:
        return self.duration * 1e3

    def lines(self) -> list[str]:
        return [
            f"Bubble count: {self.contour_count}",
            f"Processing time: {format_duration(self.duration)}",
        ]
