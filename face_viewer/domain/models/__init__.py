from .photo import PhotoData, Capture
from .detection import Detection
from .session_flags import SessionFlags

__all__ = ["PhotoData", "Capture", "Detection", "SessionFlags"]
