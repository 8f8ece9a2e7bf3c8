# Standard library imports
import asyncio
import logging
from typing import List, Optional

# Local application imports
from ....domain.models.detection import Detection
from ....domain.models.photo import Capture, PhotoData
from ....infrastructure.cache.session_store import SessionStore
from ....infrastructure.external.face_detection_client import (
    FaceDetectionClient,
    FaceDetectionError,
)

logger = logging.getLogger(__name__)


class CachePhotoUseCase:
    """
    Use case for storing a new photo and starting face detection on it.

    The photo becomes the user's current photo immediately; detection runs
    as a background task whose completion the face result cache observes.
    """

    def __init__(
        self,
        session_store: SessionStore,
        face_detection_client: FaceDetectionClient,
    ) -> None:
        self.session_store = session_store
        self.face_detection_client = face_detection_client

    async def execute(self, photo: PhotoData, user_id: str) -> Capture:
        """
        Cache a photo for display and start face detection

        Args:
            photo: Photo returned by the device session
            user_id: Owner of the photo

        Returns:
            The stored Capture
        """
        capture = Capture.from_photo(photo, user_id)

        self.session_store.photos.put(capture)
        logger.info(f"Photo cached for user {user_id}, timestamp: {capture.timestamp.isoformat()}")

        self.session_store.cleanup_face_results()

        task = asyncio.create_task(
            self._detect_faces(capture),
            name=f"detect-faces-{capture.request_id}",
        )
        self.session_store.faces.track(capture.request_id, task)
        return capture

    async def wait_for_detections(self, request_id: str) -> Optional[List[Detection]]:
        """
        Wait until detection for a request ID has a result.

        Returns:
            The detections, or None if nothing is tracked for the ID
        """
        faces = self.session_store.faces
        task = faces.pending_task(request_id)
        if task is not None:
            await asyncio.wait([task])
        return faces.get(request_id)

    async def _detect_faces(self, capture: Capture) -> List[Detection]:
        try:
            detections = await self.face_detection_client.detect(capture.buffer)
        except FaceDetectionError as e:
            logger.error(
                f"Error detecting faces for user {capture.user_id}, "
                f"requestId {capture.request_id}: {e}"
            )
            return []

        logger.info(
            f"Face detection completed for user {capture.user_id}, "
            f"requestId {capture.request_id}, found {len(detections)} faces"
        )
        return detections
