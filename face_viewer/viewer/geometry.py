"""
Box geometry for drawing detections over a resized photo.

Detections come back in the pixel space of the original image with the box
described by its centre. The webview shows the photo at some other size and
draws rectangles from their top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..domain.models.detection import Detection


Size = Tuple[float, float]


@dataclass(frozen=True)
class BoxRect:
    """Rectangle in displayed pixels, anchored at its top-left corner."""
    left: float
    top: float
    width: float
    height: float
    label: str
    confidence: float

    @property
    def caption(self) -> str:
        return f"{self.label} {self.confidence * 100:.0f}%"


def scale_detection(detection: Detection, scale_x: float, scale_y: float) -> BoxRect:
    width = detection.width * scale_x
    height = detection.height * scale_y
    return BoxRect(
        left=detection.x * scale_x - width / 2,
        top=detection.y * scale_y - height / 2,
        width=width,
        height=height,
        label=detection.class_name,
        confidence=detection.confidence,
    )


def scale_detections(
    detections: Iterable[Detection],
    natural_size: Size,
    displayed_size: Size,
) -> List[BoxRect]:
    """
    Map detections from source-image pixels to displayed pixels.

    Args:
        detections: Detections in source-image pixel space (centre + size)
        natural_size: (width, height) of the source image
        displayed_size: (width, height) the image is rendered at

    Returns:
        One BoxRect per detection; empty if the natural size is unknown (zero)
    """
    natural_w, natural_h = natural_size
    displayed_w, displayed_h = displayed_size
    if natural_w <= 0 or natural_h <= 0:
        return []

    scale_x = displayed_w / natural_w
    scale_y = displayed_h / natural_h
    return [scale_detection(detection, scale_x, scale_y) for detection in detections]
