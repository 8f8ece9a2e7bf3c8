# Local application imports
from ....domain.models.photo import Capture
from ....infrastructure.cache.session_store import SessionStore
from .errors import PhotoNotFoundError


class GetPhotoUseCase:
    """Use case for fetching the bytes of the user's current photo"""

    def __init__(self, session_store: SessionStore) -> None:
        self.session_store = session_store

    async def execute(self, user_id: str, request_id: str) -> Capture:
        """
        Get the user's current photo if it matches the requested ID

        Args:
            user_id: ID of the authenticated user
            request_id: Photo request ID from the client

        Returns:
            The cached Capture

        Raises:
            PhotoNotFoundError: If there is no photo or the ID is not current
        """
        capture = self.session_store.photos.get(user_id)
        if capture is None or capture.request_id != request_id:
            raise PhotoNotFoundError("Photo not found")
        return capture
