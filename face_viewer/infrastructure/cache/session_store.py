"""Aggregate in-memory state shared by the capture pipeline and the query API."""
import logging
from typing import List

from .face_result_cache import FaceResultCache
from .photo_cache import PhotoCache
from .session_state import SessionStateStore

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Owns the per-user session flags, the photo cache and the face results.

    A single instance is handed to use cases through the DI container so
    each test can build its own isolated store.
    """

    def __init__(self) -> None:
        self.state = SessionStateStore()
        self.photos = PhotoCache()
        self.faces = FaceResultCache()

    def cleanup_face_results(self) -> List[str]:
        """
        Drop face results that no user's current photo refers to.

        Reachability is recomputed from scratch on every call.

        Returns:
            The request IDs that were removed
        """
        dropped = self.faces.retain_only(self.photos.current_request_ids())
        if dropped:
            logger.info(f"Cleaned up face data for {len(dropped)} stale photo(s)")
        return dropped
