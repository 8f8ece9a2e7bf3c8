from .errors import PhotoNotFoundError, FaceDataPendingError
from .get_latest_photo import GetLatestPhotoUseCase
from .get_photo import GetPhotoUseCase
from .get_faces import GetFacesUseCase

__all__ = [
    "PhotoNotFoundError",
    "FaceDataPendingError",
    "GetLatestPhotoUseCase",
    "GetPhotoUseCase",
    "GetFacesUseCase",
]
