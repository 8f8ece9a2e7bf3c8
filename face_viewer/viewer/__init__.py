from .geometry import BoxRect, scale_detections
from .photo_viewer import PhotoViewer, ViewerFrame, ViewerStatus

__all__ = ["BoxRect", "scale_detections", "PhotoViewer", "ViewerFrame", "ViewerStatus"]
