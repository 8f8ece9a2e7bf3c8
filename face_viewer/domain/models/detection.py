# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class Detection:
    """
    One detected face.

    The box is encoded as centre point plus size, in pixels of the source
    image (the encoding returned by the hosted detection model).
    """
    x: float
    y: float
    width: float
    height: float
    confidence: float
    class_name: str
    class_id: int
    detection_id: str

    def __post_init__(self) -> None:
        """Business validations"""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {self.confidence}")
        if self.width < 0 or self.height < 0:
            raise ValueError("Detection width and height must be non-negative")
