# Local application imports
from ....infrastructure.cache.session_store import SessionStore
from ...dto.photo_dto import FacePredictionResponse, FacesResponse
from .errors import FaceDataPendingError, PhotoNotFoundError


class GetFacesUseCase:
    """Use case for reading face detection results of the user's current photo"""

    def __init__(self, session_store: SessionStore) -> None:
        self.session_store = session_store

    async def execute(self, user_id: str, request_id: str) -> FacesResponse:
        """
        Get the detected faces for a photo

        Ownership is checked before availability: an ID that is stale and an
        ID that never existed both fail the ownership check the same way.

        Args:
            user_id: ID of the authenticated user
            request_id: Photo request ID from the client

        Returns:
            FacesResponse with the detections and their count

        Raises:
            PhotoNotFoundError: If the ID is not the user's current photo
            FaceDataPendingError: If detection has not finished yet
        """
        capture = self.session_store.photos.get(user_id)
        if capture is None or capture.request_id != request_id:
            raise PhotoNotFoundError("Photo not found or not authorized")

        detections = self.session_store.faces.get(request_id)
        if detections is None:
            raise FaceDataPendingError("No face data available yet")

        return FacesResponse(
            faces=[FacePredictionResponse.from_detection(detection) for detection in detections],
            count=len(detections),
            request_id=request_id,
        )
