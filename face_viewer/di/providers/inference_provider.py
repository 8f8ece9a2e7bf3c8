from typing import TYPE_CHECKING
from ...infrastructure.external.face_detection_client import FaceDetectionClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class InferenceProvider:
    """External inference provider - registers the face detection client"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register FaceDetectionClient as singleton (shared across all use cases).
        It sends requests through the shared pooled HTTP client.
        """
        container.register_singleton(FaceDetectionClient, FaceDetectionClient())
