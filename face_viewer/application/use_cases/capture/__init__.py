from .cache_photo import CachePhotoUseCase

__all__ = ["CachePhotoUseCase"]
