"""Single-slot photo cache: the newest capture per user."""
import logging
from typing import Dict, Optional, Set

from ...domain.models.photo import Capture

logger = logging.getLogger(__name__)


class PhotoCache:
    """
    Holds exactly one Capture per user.

    A put for a user overwrites that user's slot; nothing else evicts, so
    memory grows with the number of users who ever captured a photo.
    """

    def __init__(self) -> None:
        self._photos: Dict[str, Capture] = {}
        self._latest_timestamp: Dict[str, int] = {}

    def put(self, capture: Capture) -> None:
        previous = self._photos.get(capture.user_id)
        self._photos[capture.user_id] = capture
        self._latest_timestamp[capture.user_id] = capture.timestamp_ms
        if previous is not None:
            logger.debug(
                f"Photo {previous.request_id} for user {capture.user_id} "
                f"superseded by {capture.request_id}"
            )

    def get(self, user_id: str) -> Optional[Capture]:
        return self._photos.get(user_id)

    def latest_timestamp(self, user_id: str) -> Optional[int]:
        return self._latest_timestamp.get(user_id)

    def current_request_ids(self) -> Set[str]:
        """Request IDs of every user's current capture."""
        return {capture.request_id for capture in self._photos.values()}

    def __len__(self) -> int:
        return len(self._photos)
