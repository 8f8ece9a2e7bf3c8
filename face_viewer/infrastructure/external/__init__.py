"""External service clients for communicating with external systems"""

from .face_detection_client import FaceDetectionClient, FaceDetectionError

__all__ = [
    "FaceDetectionClient",
    "FaceDetectionError",
]
