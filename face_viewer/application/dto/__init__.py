from .auth_dto import AuthenticatedUser
from .photo_dto import LatestPhotoResponse, FacePredictionResponse, FacesResponse

__all__ = [
    "AuthenticatedUser",
    "LatestPhotoResponse",
    "FacePredictionResponse",
    "FacesResponse",
]
