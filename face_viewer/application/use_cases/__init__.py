from .auth import GetCurrentUserUseCase
from .capture import CachePhotoUseCase
from .photo import (
    GetLatestPhotoUseCase,
    GetPhotoUseCase,
    GetFacesUseCase,
)

__all__ = [
    "GetCurrentUserUseCase",
    "CachePhotoUseCase",
    "GetLatestPhotoUseCase",
    "GetPhotoUseCase",
    "GetFacesUseCase",
]
