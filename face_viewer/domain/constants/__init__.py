"""Constants for domain model field names"""

from .prediction_fields import PredictionFields

__all__ = [
    "PredictionFields",
]
