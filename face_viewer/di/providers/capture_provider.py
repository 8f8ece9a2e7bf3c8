from typing import TYPE_CHECKING
from ...infrastructure.cache.session_store import SessionStore
from ...application.use_cases.capture.cache_photo import CachePhotoUseCase
from ...application.services.capture_service import CaptureService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CaptureProvider:
    """Capture service provider - one CaptureService owns every session ticker"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register CaptureService as singleton.
        It must be a singleton because it tracks the running session tickers.
        """
        container.register_singleton(
            CaptureService,
            CaptureService(
                session_store=container.get(SessionStore),
                cache_photo_use_case=container.get(CachePhotoUseCase)
            )
        )
