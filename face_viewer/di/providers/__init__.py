from .cache_provider import CacheProvider
from .inference_provider import InferenceProvider
from .auth_provider import AuthProvider
from .photo_provider import PhotoProvider
from .capture_provider import CaptureProvider


__all__ = [
    "CacheProvider",
    "InferenceProvider",
    "AuthProvider",
    "PhotoProvider",
    "CaptureProvider",
]
