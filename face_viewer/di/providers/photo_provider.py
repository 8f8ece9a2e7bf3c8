from typing import TYPE_CHECKING
from ...infrastructure.cache.session_store import SessionStore
from ...infrastructure.external.face_detection_client import FaceDetectionClient
from ...application.use_cases.capture.cache_photo import CachePhotoUseCase
from ...application.use_cases.photo.get_latest_photo import GetLatestPhotoUseCase
from ...application.use_cases.photo.get_photo import GetPhotoUseCase
from ...application.use_cases.photo.get_faces import GetFacesUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PhotoProvider:
    """Photo use case provider - registers photo caching and query use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all photo use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CachePhotoUseCase,
            lambda: CachePhotoUseCase(
                session_store=container.get(SessionStore),
                face_detection_client=container.get(FaceDetectionClient)
            )
        )

        container.register_factory(
            GetLatestPhotoUseCase,
            lambda: GetLatestPhotoUseCase(
                session_store=container.get(SessionStore)
            )
        )

        container.register_factory(
            GetPhotoUseCase,
            lambda: GetPhotoUseCase(
                session_store=container.get(SessionStore)
            )
        )

        container.register_factory(
            GetFacesUseCase,
            lambda: GetFacesUseCase(
                session_store=container.get(SessionStore)
            )
        )
