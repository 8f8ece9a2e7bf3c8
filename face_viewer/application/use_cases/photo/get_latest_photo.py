# Local application imports
from ....infrastructure.cache.session_store import SessionStore
from ...dto.photo_dto import LatestPhotoResponse
from .errors import PhotoNotFoundError


class GetLatestPhotoUseCase:
    """Use case for describing the user's current photo"""

    def __init__(self, session_store: SessionStore) -> None:
        self.session_store = session_store

    async def execute(self, user_id: str) -> LatestPhotoResponse:
        """
        Get the request ID and timestamp of the user's current photo

        Args:
            user_id: ID of the authenticated user

        Returns:
            LatestPhotoResponse for the current photo

        Raises:
            PhotoNotFoundError: If the user has no photo yet
        """
        capture = self.session_store.photos.get(user_id)
        if capture is None:
            raise PhotoNotFoundError("No photo available")

        return LatestPhotoResponse(
            request_id=capture.request_id,
            timestamp=capture.timestamp_ms,
            has_photo=True,
        )
