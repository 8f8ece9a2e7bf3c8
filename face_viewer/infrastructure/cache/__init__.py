from .face_result_cache import FaceResultCache
from .photo_cache import PhotoCache
from .session_state import SessionStateStore
from .session_store import SessionStore

__all__ = ["FaceResultCache", "PhotoCache", "SessionStateStore", "SessionStore"]
